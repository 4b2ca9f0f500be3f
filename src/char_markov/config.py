from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any


# Seed used by the "fixed" generation mode.
DEFAULT_SEED = 20


def check_window_length(window_length: Any) -> int:
    """Return `window_length` if it is a positive int, else raise ValueError."""
    if isinstance(window_length, bool) or not isinstance(window_length, int):
        raise ValueError(f"window_length must be an integer, got {window_length!r}")
    if window_length < 1:
        raise ValueError(f"window_length must be >= 1, got {window_length}")
    return window_length


@dataclass(frozen=True)
class ModelConfig:
    """
    Settings needed to build a MarkovModel.

    Attributes:
        window_length: Number of context characters (must be >= 1)
        seed: Seed used when random_generation is False
        random_generation: Seed from the system instead of `seed`
    """
    window_length: int = 3
    seed: int = DEFAULT_SEED
    random_generation: bool = False

    def __post_init__(self):
        check_window_length(self.window_length)

    def effective_seed(self) -> int | None:
        """None means "seed from the system"."""
        return None if self.random_generation else self.seed

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> ModelConfig:
        """Create a ModelConfig from a dictionary, ignoring unknown keys."""
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in config_dict.items() if k in names})

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

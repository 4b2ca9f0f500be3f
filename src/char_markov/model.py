"""
Markov Model Module

Fixed-order character-level Markov language model. Training slides a window
of `window_length` characters over a corpus and counts which character follows
each window; generation extends a seed text one sampled character at a time.

Usage:
    model = MarkovModel(window_length=3, seed=20)
    model.train(corpus_text)
    print(model.generate("The", 200))
"""

from __future__ import annotations

import logging
import random
from collections import deque
from enum import Enum
from typing import Iterable, Iterator

from .config import ModelConfig, check_window_length
from .frequency_table import FrequencyTable, check_character

logger = logging.getLogger(__name__)


class ModelPhase(Enum):
    UNTRAINED = "untrained"
    TRAINED = "trained"


class MarkovModel:
    """
    Maps every observed context window to the FrequencyTable of the
    characters that followed it.

    Training is cumulative: calling `train` again adds to the existing counts
    and recomputes the probabilities of every table.

    Attributes:
        window_length: Number of context characters (K)
        phase: UNTRAINED until the first call to `train`
    """

    def __init__(
        self,
        window_length: int,
        seed: int | None = None,
        rng: random.Random | None = None,
    ):
        """
        Args:
            window_length: Positive context length
            seed: Fixed seed for reproducible output; None seeds from the system
            rng: Pre-built random source, overrides `seed`

        Raises:
            ValueError: If window_length is not a positive integer
        """
        self.window_length = check_window_length(window_length)
        self.seed = seed
        self._random = rng if rng is not None else random.Random(seed)
        self._tables: dict[str, FrequencyTable] = {}
        self.phase = ModelPhase.UNTRAINED

    @classmethod
    def from_config(cls, config: ModelConfig) -> MarkovModel:
        return cls(config.window_length, seed=config.effective_seed())

    @property
    def is_trained(self) -> bool:
        return self.phase is ModelPhase.TRAINED

    def train(self, corpus: Iterable[str]) -> None:
        """
        Count window -> next-character observations over `corpus`.

        The whole corpus is checked before any table is touched, so a bad item
        leaves the model exactly as it was.

        Args:
            corpus: Training text, or any iterable yielding its characters

        Raises:
            ValueError: If an item of `corpus` is not a single character
        """
        chars = [check_character(c) for c in corpus]

        window: deque[str] = deque(maxlen=self.window_length)
        observations = 0

        for char in chars:
            if len(window) == self.window_length:
                key = "".join(window)
                table = self._tables.get(key)
                if table is None:
                    table = FrequencyTable()
                    self._tables[key] = table
                table.observe(char)
                observations += 1
            window.append(char)

        for key, table in self._tables.items():
            table.finalize_probabilities()
            logger.debug(f"Window {key!r}: {table.size()} characters, {table.total_count()} observations")

        self.phase = ModelPhase.TRAINED

        if observations == 0:
            logger.warning(
                f"Corpus is shorter than window_length + 1 ({self.window_length + 1}); "
                "no windows observed"
            )
        logger.info(
            f"Trained on {observations} observations; "
            f"model has {len(self._tables)} windows"
        )

    def generate(self, seed_text: str, target_length: int) -> str:
        """
        Generate `target_length` characters following `seed_text`.

        The context window starts at the beginning of `seed_text` and moves one
        character to the right for every character appended.

        Args:
            seed_text: Initial text; returned unchanged if shorter than the window
            target_length: Number of characters to append

        Returns:
            seed_text followed by the generated characters. Generation stops
            early, returning what has been produced so far, when the current
            window was never seen during training.

        Raises:
            RuntimeError: If the model has not been trained
            ValueError: If target_length is negative
        """
        if not self.is_trained:
            raise RuntimeError("MarkovModel.generate() called before train()")
        if isinstance(target_length, bool) or not isinstance(target_length, int):
            raise ValueError(f"target_length must be an integer, got {target_length!r}")
        if target_length < 0:
            raise ValueError(f"target_length must be >= 0, got {target_length}")

        if len(seed_text) < self.window_length:
            return seed_text

        output = list(seed_text)
        i = 0
        while len(output) - len(seed_text) < target_length:
            window = "".join(output[i : i + self.window_length])
            table = self._tables.get(window)
            if table is None:
                logger.debug(f"Unseen window {window!r}; stopping after {i} characters")
                break
            output.append(table.sample(self._random.random()).character)
            i += 1

        return "".join(output)

    def get_table(self, window: str) -> FrequencyTable | None:
        return self._tables.get(window)

    def windows(self) -> list[str]:
        return list(self._tables)

    def items(self) -> Iterator[tuple[str, FrequencyTable]]:
        return iter(self._tables.items())

    def __len__(self) -> int:
        return len(self._tables)

    def __contains__(self, window: object) -> bool:
        return window in self._tables

    def __str__(self) -> str:
        return "".join(f"{key} : {table}\n" for key, table in self._tables.items())

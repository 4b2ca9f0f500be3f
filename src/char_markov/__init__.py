"""Fixed-order character-level Markov language model.

Train a MarkovModel on a text and generate new text from it; the CLI lives in
`char_markov.cli`.
"""

from .config import DEFAULT_SEED, ModelConfig
from .frequency_table import CharEntry, FrequencyTable
from .model import MarkovModel, ModelPhase

__version__ = "1.0.0"

__all__ = [
    "DEFAULT_SEED",
    "CharEntry",
    "FrequencyTable",
    "MarkovModel",
    "ModelConfig",
    "ModelPhase",
]

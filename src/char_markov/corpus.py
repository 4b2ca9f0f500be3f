from __future__ import annotations

import logging
import re
import unicodedata
from dataclasses import dataclass
from pathlib import Path

import regex  # type: ignore

logger = logging.getLogger(__name__)


_WHITESPACE_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class CorpusConfig:
    """Optional normalization applied to a corpus before training.

    Everything is off by default: the model learns raw characters.
    """

    lowercase: bool = False
    strip_accents: bool = False
    normalize_whitespace: bool = False


def normalize_corpus(text: str, config: CorpusConfig | None = None) -> str:
    cfg = config or CorpusConfig()
    s = text

    if cfg.lowercase:
        s = s.lower()

    if cfg.strip_accents:
        # Drop combining marks after decomposition
        s = regex.sub(r"\p{Mn}+", "", unicodedata.normalize("NFKD", s))

    if cfg.normalize_whitespace:
        s = _WHITESPACE_RE.sub(" ", s).strip()

    return s


def read_corpus(
    path: str | Path,
    encoding: str = "utf-8",
    config: CorpusConfig | None = None,
) -> str:
    """Read the full decoded text of a training file.

    Raises FileNotFoundError / UnicodeDecodeError unchanged.
    """

    path = Path(path)
    # newline="" keeps line endings as they are in the file
    with open(path, "r", encoding=encoding, newline="") as f:
        text = f.read()

    if config is not None:
        text = normalize_corpus(text, config)

    if not text:
        logger.warning(f"Corpus file is empty: {path}")
    logger.info(f"Read {len(text)} characters from {path}")
    return text

"""
Command-line entry point for the character-level Markov model.

Usage:
    char-markov 3 "The" 200 fixed corpus.txt
    char-markov 5 "Once upon" 500 random corpus.txt --show-model
"""

from __future__ import annotations

import argparse
import logging
import sys

import pandas as pd

from .config import DEFAULT_SEED, ModelConfig
from .corpus import CorpusConfig, read_corpus
from .model import MarkovModel
from .report import model_to_frame

logger = logging.getLogger(__name__)


MODES = ("random", "fixed")


def _positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return n


def _non_negative_int(value: str) -> int:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be a non-negative integer, got {value}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="char-markov",
        description="Train a character-level Markov model on a text file and generate text from it",
    )

    parser.add_argument("window_length", type=_positive_int, help="Context window length")
    parser.add_argument("seed_text", help="Text to start generating from")
    parser.add_argument("length", type=_non_negative_int, help="Number of characters to generate")
    parser.add_argument(
        "mode",
        choices=MODES,
        help="'fixed' for reproducible output, 'random' for a system-seeded random source",
    )
    parser.add_argument("corpus", help="Path to the training text file")

    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help=f"Seed for 'fixed' mode (default: {DEFAULT_SEED})",
    )
    parser.add_argument("--encoding", default="utf-8", help="Corpus file encoding")
    parser.add_argument(
        "--normalize",
        action="store_true",
        help="Lowercase, strip accents and collapse whitespace before training",
    )
    parser.add_argument(
        "--show-model",
        action="store_true",
        help="Print the trained window tables before the generated text",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    config_dict = {
        "window_length": args.window_length,
        "random_generation": args.mode == "random",
    }
    if args.seed is not None:
        config_dict["seed"] = args.seed
    config = ModelConfig.from_dict(config_dict)

    corpus_config = None
    if args.normalize:
        corpus_config = CorpusConfig(lowercase=True, strip_accents=True, normalize_whitespace=True)

    try:
        text = read_corpus(args.corpus, encoding=args.encoding, config=corpus_config)
    except FileNotFoundError:
        logger.error(f"Corpus file not found: {args.corpus}")
        return 1
    except UnicodeDecodeError as e:
        logger.error(f"Encoding error in {args.corpus}: {e}")
        return 1
    except LookupError as e:
        logger.error(f"Unknown encoding {args.encoding!r}: {e}")
        return 1
    except OSError as e:
        logger.error(f"Could not read corpus {args.corpus}: {e}")
        return 1

    model = MarkovModel.from_config(config)
    model.train(text)

    if args.show_model:
        with pd.option_context("display.max_rows", None, "display.width", None):
            print(model_to_frame(model).to_string(index=False))

    print(model.generate(args.seed_text, args.length))
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Packaged word lists and level table."""

from pathlib import Path

_DATA_DIR = Path(__file__).parent

DEFAULT_WORDS_FILE = _DATA_DIR / "words.txt"
DEFAULT_HIDDEN_WORDS_FILE = _DATA_DIR / "hidden_words.txt"
DEFAULT_LEVELS_FILE = _DATA_DIR / "levels.csv"

__all__ = [
    "DEFAULT_WORDS_FILE",
    "DEFAULT_HIDDEN_WORDS_FILE",
    "DEFAULT_LEVELS_FILE",
]

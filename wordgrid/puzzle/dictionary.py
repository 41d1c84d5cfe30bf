"""Accepted words and hidden target words."""

from pathlib import Path
from typing import FrozenSet, Iterable, List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, field_validator

from ..data import DEFAULT_WORDS_FILE, DEFAULT_HIDDEN_WORDS_FILE


def parse_word_list(text: str) -> List[str]:
    """Split a one-word-per-line text into trimmed, uppercased words, dropping blanks."""
    return [line.strip().upper() for line in text.splitlines() if line.strip()]


class Dictionary(BaseModel):
    """
    Immutable word lists for a game.

    Attributes:
        valid_words: Every word a player may submit
        hidden_words: Ordered candidates for placement on the board
    """

    model_config = ConfigDict(frozen=True)

    valid_words: FrozenSet[str]
    hidden_words: Tuple[str, ...] = ()

    @field_validator("valid_words", mode="before")
    @classmethod
    def _normalize_valid(cls, words: Iterable[str]) -> FrozenSet[str]:
        return frozenset(w.strip().upper() for w in words if w.strip())

    @field_validator("hidden_words", mode="before")
    @classmethod
    def _normalize_hidden(cls, words: Iterable[str]) -> Tuple[str, ...]:
        return tuple(dict.fromkeys(w.strip().upper() for w in words if w.strip()))

    @classmethod
    def from_text(cls, words_text: str, hidden_text: str = "") -> "Dictionary":
        """Build a dictionary from raw one-word-per-line texts."""
        return cls(
            valid_words=parse_word_list(words_text),
            hidden_words=parse_word_list(hidden_text),
        )

    @classmethod
    def from_files(
        cls,
        words_path: Optional[str | Path] = None,
        hidden_path: Optional[str | Path] = None
    ) -> "Dictionary":
        """
        Load word lists from disk, falling back to the packaged lists.

        Raises:
            FileNotFoundError: If a given path does not exist
        """
        words_path = Path(words_path) if words_path else DEFAULT_WORDS_FILE
        hidden_path = Path(hidden_path) if hidden_path else DEFAULT_HIDDEN_WORDS_FILE
        return cls.from_text(
            words_path.read_text(encoding="utf-8"),
            hidden_path.read_text(encoding="utf-8"),
        )

    def is_valid_word(self, word: str) -> bool:
        """Exact, case-sensitive membership test against the accepted words."""
        return word in self.valid_words

    def __len__(self) -> int:
        return len(self.valid_words)

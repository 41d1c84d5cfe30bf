"""Frequency-weighted random letters for filling the board."""

import random
from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field


# Relative English letter frequencies (percent)
LETTER_FREQUENCIES: Dict[str, float] = {
    "E": 12.7, "T": 9.1, "A": 8.2, "O": 7.5, "I": 7.0, "N": 6.7, "S": 6.3,
    "H": 6.1, "R": 6.0, "D": 4.3, "L": 4.0, "C": 2.8, "U": 2.8, "M": 2.4,
    "W": 2.4, "F": 2.2, "G": 2.0, "Y": 2.0, "P": 1.9, "B": 1.5, "V": 1.0,
    "K": 0.8, "J": 0.2, "X": 0.2, "Q": 0.1, "Z": 0.1,
}


def build_pool(frequencies: Dict[str, float]) -> List[str]:
    """Flatten a frequency table into a list holding round(weight * 10) copies of each letter."""
    pool: List[str] = []
    for letter, weight in frequencies.items():
        pool.extend([letter.upper()] * int(round(weight * 10)))
    return pool


class WeightedLetterGenerator(BaseModel):
    """
    Draws single letters with probability proportional to their frequency.

    Attributes:
        frequencies: Letter -> relative weight
        seed: Optional random seed for reproducibility
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    frequencies: Dict[str, float] = Field(default_factory=lambda: dict(LETTER_FREQUENCIES))
    seed: Optional[int] = None
    _rng: random.Random = None
    _pool: List[str] = None

    def model_post_init(self, __context) -> None:
        """Build the draw pool and the random generator."""
        self._pool = build_pool(self.frequencies)
        if not self._pool:
            raise ValueError("Letter frequencies produce an empty pool")
        self._rng = random.Random(self.seed)

    @classmethod
    def with_rng(cls, rng: random.Random, **kwargs) -> "WeightedLetterGenerator":
        """Create a generator that draws from an existing random source."""
        generator = cls(**kwargs)
        generator._rng = rng
        return generator

    @property
    def pool_size(self) -> int:
        return len(self._pool)

    def probability(self, letter: str) -> float:
        """Exact probability that ``next_letter`` returns ``letter``."""
        return self._pool.count(letter.upper()) / len(self._pool)

    def next_letter(self) -> str:
        """Draw one letter."""
        return self._pool[self._rng.randrange(len(self._pool))]

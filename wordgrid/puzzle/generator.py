"""
Puzzle grid generation.

Hidden words are laid along random self-avoiding paths of adjacent cells
using a randomized depth-first search. Placement is opportunistic: a word
that cannot be fitted around the letters already committed is dropped and
generation carries on. Remaining cells are filled with frequency-weighted
letters and one cell is marked gold.
"""

import logging
import random
from typing import List, Optional, Sequence
from pydantic import BaseModel, ConfigDict, Field

from .grid import empty_layout, neighbors
from .letters import WeightedLetterGenerator
from .models import Coord, Grid, GenerationResult, PlacedWord

logger = logging.getLogger(__name__)

MIN_WORDS_TO_PLACE = 2
MAX_WORDS_TO_PLACE = 5
DEFAULT_GRID_SIZE = 5

Layout = List[List[Optional[str]]]


def find_path(
    word: str,
    layout: Layout,
    start: Coord,
    rng: random.Random
) -> Optional[List[Coord]]:
    """
    Search for a path spelling ``word`` that begins at ``start``.

    A cell may be used if it is empty or already holds the needed letter.
    Cells are never reused within one path. Neighbour order is shuffled at
    every step.

    Args:
        word: Uppercase word to place
        layout: Board under construction, ``layout[y][x]`` is a letter or None
        start: First cell of the path
        rng: Random source for neighbour shuffling

    Returns:
        The list of coordinates, or None if no path exists from ``start``
    """
    size = len(layout)
    visited = [[False] * size for _ in range(size)]
    path: List[Coord] = []

    def search(coord: Coord, index: int) -> bool:
        x, y = coord
        if not (0 <= x < size and 0 <= y < size) or visited[y][x]:
            return False

        existing = layout[y][x]
        if existing is not None and existing != word[index]:
            return False

        visited[y][x] = True
        path.append(coord)

        if index == len(word) - 1:
            return True

        candidates = neighbors(coord)
        rng.shuffle(candidates)
        for candidate in candidates:
            if search(candidate, index + 1):
                return True

        # Backtrack
        visited[y][x] = False
        path.pop()
        return False

    return path if search(start, 0) else None


def try_place_word(word: str, layout: Layout, rng: random.Random) -> Optional[List[Coord]]:
    """
    Try every start cell in random order and commit the first path found.

    On success the word's letters are written into ``layout``.

    Returns:
        The committed path, or None if the word did not fit
    """
    size = len(layout)
    if len(word) > size * size:
        return None

    starts = [Coord(x, y) for y in range(size) for x in range(size)]
    rng.shuffle(starts)

    for start in starts:
        path = find_path(word, layout, start, rng)
        if path:
            for letter, (x, y) in zip(word, path):
                layout[y][x] = letter
            return path

    return None


class PuzzleGridGenerator(BaseModel):
    """
    Builds boards seeded with hidden words.

    Attributes:
        seed: Optional random seed for reproducibility
        min_words: Lower bound on hidden words attempted per board
        max_words: Upper bound on hidden words attempted per board
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    seed: Optional[int] = None
    min_words: int = Field(default=MIN_WORDS_TO_PLACE, ge=0)
    max_words: int = Field(default=MAX_WORDS_TO_PLACE, ge=0)
    _rng: random.Random = None
    _letters: WeightedLetterGenerator = None

    def model_post_init(self, __context) -> None:
        """Initialize the random generator after model creation."""
        self._rng = random.Random(self.seed)
        self._letters = WeightedLetterGenerator.with_rng(self._rng)

    def choose_words(self, hidden_words: Sequence[str]) -> List[str]:
        """Pick a random subset of between min_words and max_words hidden words."""
        # Case variants of one word count once
        words = list(dict.fromkeys(w.upper() for w in hidden_words))
        upper = min(self.max_words, len(words))
        lower = min(self.min_words, upper)
        count = self._rng.randint(lower, upper)

        self._rng.shuffle(words)
        return words[:count]

    def generate(
        self,
        hidden_words: Sequence[str],
        grid_size: int = DEFAULT_GRID_SIZE
    ) -> GenerationResult:
        """
        Generate a new board.

        Args:
            hidden_words: Candidate words to hide
            grid_size: Side length of the board

        Returns:
            GenerationResult with the finished grid and the placed words

        Raises:
            ValueError: If grid_size is less than 1
        """
        if grid_size < 1:
            raise ValueError(f"Grid size must be at least 1 (got {grid_size})")

        layout = empty_layout(grid_size)
        placed: List[PlacedWord] = []
        dropped: List[str] = []

        for word in self.choose_words(hidden_words):
            if not (word.isascii() and word.isalpha()):
                logger.warning("Skipping non-alphabetic hidden word: %r", word)
                dropped.append(word)
                continue
            path = try_place_word(word, layout, self._rng)
            if path is None:
                logger.warning("Failed to place word: %s", word)
                dropped.append(word)
                continue
            logger.debug("Placed %s along %s", word, [tuple(c) for c in path])
            placed.append(PlacedWord(word=word, path=tuple(path)))

        letters = [
            [cell if cell is not None else self._letters.next_letter() for cell in row]
            for row in layout
        ]
        gold = Coord(self._rng.randrange(grid_size), self._rng.randrange(grid_size))

        return GenerationResult(
            grid=Grid.from_letters(letters, gold=gold),
            placed_words=tuple(placed),
            dropped_words=tuple(dropped),
        )

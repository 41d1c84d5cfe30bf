"""Point values for accepted words."""

from typing import Dict, Iterable

from ..puzzle.models import Coord, Grid, SpecialTile


MIN_WORD_LENGTH = 3

# Points for short words; anything longer earns 9 plus one per extra letter
BASE_POINTS: Dict[int, int] = {3: 1, 4: 3, 5: 5, 6: 9}

HIDDEN_WORD_MULTIPLIER = 2

SPECIAL_TILE_MULTIPLIERS: Dict[SpecialTile, int] = {
    "none": 1,
    "gold": 2,
}


def base_points(word: str) -> int:
    """Length-based points before any bonus."""
    length = len(word)
    if length > 6:
        return BASE_POINTS[6] + (length - 6)
    return BASE_POINTS.get(length, 0)


def special_multiplier(grid: Grid, path: Iterable[Coord]) -> int:
    """Product of the bonuses of every special tile along ``path``."""
    multiplier = 1
    for coord in path:
        multiplier *= SPECIAL_TILE_MULTIPLIERS[grid.special_at(coord)]
    return multiplier


def score(word: str, is_hidden: bool, special_multiplier: int = 1) -> int:
    """
    Points for an accepted word.

    Args:
        word: The validated word
        is_hidden: Whether the word is one of the board's hidden words (doubles the points)
        special_multiplier: Combined bonus from special tiles in the selection

    Returns:
        Non-negative point value
    """
    points = base_points(word)
    if is_hidden:
        points *= HIDDEN_WORD_MULTIPLIER
    return points * special_multiplier

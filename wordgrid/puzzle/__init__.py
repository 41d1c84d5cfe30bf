"""Puzzle board generation for wordgrid."""

from .models import Coord, Cell, Grid, PlacedWord, GenerationResult, SpecialTile, is_adjacent, rotate_coord
from .letters import LETTER_FREQUENCIES, WeightedLetterGenerator
from .dictionary import Dictionary, parse_word_list
from .generator import PuzzleGridGenerator, find_path, try_place_word
from .grid import neighbors, render_grid

__all__ = [
    # Models
    "Coord",
    "Cell",
    "Grid",
    "PlacedWord",
    "GenerationResult",
    "SpecialTile",
    "is_adjacent",
    "rotate_coord",
    # Letters
    "LETTER_FREQUENCIES",
    "WeightedLetterGenerator",
    # Words
    "Dictionary",
    "parse_word_list",
    # Generation
    "PuzzleGridGenerator",
    "find_path",
    "try_place_word",
    # Grid utilities
    "neighbors",
    "render_grid",
]

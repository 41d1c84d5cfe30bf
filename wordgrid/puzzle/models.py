"""Data models for puzzle grids and hidden-word placements."""

from typing import List, Literal, NamedTuple, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


# Special tile kinds; extend here when new bonus tiles are added
SpecialTile = Literal["none", "gold"]


class Coord(NamedTuple):
    """A cell position on the board: column x, row y."""
    x: int
    y: int


def is_adjacent(a: Coord, b: Coord) -> bool:
    """True if two cells touch horizontally, vertically or diagonally."""
    return max(abs(a.x - b.x), abs(a.y - b.y)) == 1


class Cell(BaseModel):
    """A single board cell."""
    model_config = ConfigDict(frozen=True)

    letter: str = Field(..., pattern=r'^[A-Z]$')
    special: SpecialTile = "none"


class PlacedWord(BaseModel):
    """A hidden word and the contiguous path of cells it occupies."""
    model_config = ConfigDict(frozen=True)

    word: str = Field(..., min_length=1, pattern=r'^[A-Z]+$')
    path: Tuple[Coord, ...]

    @model_validator(mode="after")
    def _check_path(self) -> "PlacedWord":
        if len(self.path) != len(self.word):
            raise ValueError(
                f"Path length {len(self.path)} does not match '{self.word}' (length {len(self.word)})"
            )
        if len(set(self.path)) != len(self.path):
            raise ValueError(f"Path for '{self.word}' revisits a cell")
        for prev, cur in zip(self.path, self.path[1:]):
            if not is_adjacent(prev, cur):
                raise ValueError(f"Path for '{self.word}' jumps from {tuple(prev)} to {tuple(cur)}")
        return self


class Grid(BaseModel):
    """
    An immutable square board of lettered cells.

    Rows are stored top to bottom, so ``cells[y][x]`` is the cell at ``Coord(x, y)``.
    """
    model_config = ConfigDict(frozen=True)

    cells: Tuple[Tuple[Cell, ...], ...]

    @field_validator("cells")
    @classmethod
    def _check_square(cls, cells):
        size = len(cells)
        if size == 0:
            raise ValueError("Grid must have at least one row")
        for row in cells:
            if len(row) != size:
                raise ValueError(f"Grid must be square: row of length {len(row)} in a {size}-row grid")
        return cells

    @classmethod
    def from_letters(
        cls,
        letters: List[List[str]],
        gold: Optional[Coord] = None
    ) -> "Grid":
        """
        Build a grid from rows of letters.

        Args:
            letters: Row-major letters, ``letters[y][x]``
            gold: Optional coordinate of the gold tile

        Returns:
            A new Grid
        """
        return cls(cells=tuple(
            tuple(
                Cell(letter=letter.upper(), special="gold" if gold == (x, y) else "none")
                for x, letter in enumerate(row)
            )
            for y, row in enumerate(letters)
        ))

    @property
    def size(self) -> int:
        """Side length of the board."""
        return len(self.cells)

    def in_bounds(self, coord: Coord) -> bool:
        """Check whether a coordinate lies on the board."""
        return 0 <= coord[0] < self.size and 0 <= coord[1] < self.size

    def cell_at(self, coord: Coord) -> Cell:
        x, y = coord
        return self.cells[y][x]

    def letter_at(self, coord: Coord) -> str:
        return self.cell_at(coord).letter

    def special_at(self, coord: Coord) -> SpecialTile:
        return self.cell_at(coord).special

    def coords(self) -> List[Coord]:
        """All board coordinates in row-major order."""
        return [Coord(x, y) for y in range(self.size) for x in range(self.size)]

    def special_coords(self, kind: SpecialTile = "gold") -> List[Coord]:
        """Coordinates of every cell carrying the given special marker."""
        return [c for c in self.coords() if self.special_at(c) == kind]

    def rows(self) -> List[str]:
        """The board as one string of letters per row."""
        return [''.join(cell.letter for cell in row) for row in self.cells]

    def rotated(self) -> "Grid":
        """
        Return the board turned 90 degrees clockwise.

        The cell at (x, y) moves to (size - 1 - y, x); special markers travel with their letters.
        """
        n = self.size
        return Grid(cells=tuple(
            tuple(self.cells[n - 1 - x][y] for x in range(n))
            for y in range(n)
        ))


def rotate_coord(coord: Coord, size: int) -> Coord:
    """Where a cell ends up after a clockwise quarter turn of a size x size board."""
    return Coord(size - 1 - coord.y, coord.x)


class GenerationResult(BaseModel):
    """Output of a single grid generation."""
    model_config = ConfigDict(frozen=True)

    grid: Grid
    placed_words: Tuple[PlacedWord, ...] = ()
    dropped_words: Tuple[str, ...] = ()

    def find_placed(self, word: str) -> Optional[PlacedWord]:
        """Return the placement for ``word`` if it was hidden on this grid."""
        for placed in self.placed_words:
            if placed.word == word:
                return placed
        return None

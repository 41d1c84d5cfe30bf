"""Grid geometry and text rendering utilities."""

from typing import Iterable, List, Optional, Set

from .models import Coord, Grid, PlacedWord


# The eight king-move offsets around a cell
NEIGHBOR_OFFSETS: List[Coord] = [
    Coord(dx, dy)
    for dx in (-1, 0, 1)
    for dy in (-1, 0, 1)
    if (dx, dy) != (0, 0)
]


def neighbors(coord: Coord) -> List[Coord]:
    """All eight surrounding coordinates, including off-board ones."""
    return [Coord(coord.x + dx, coord.y + dy) for dx, dy in NEIGHBOR_OFFSETS]


def empty_layout(size: int) -> List[List[Optional[str]]]:
    """A size x size working buffer with every cell unassigned."""
    return [[None] * size for _ in range(size)]


def render_grid(
    grid: Grid,
    placed_words: Optional[Iterable[PlacedWord]] = None,
    show_hidden: bool = False
) -> str:
    """
    Render the board to a string.

    Letters are space separated, one row per line. The gold tile is wrapped
    in brackets. With ``show_hidden`` set, cells belonging to a placed
    hidden word are shown in lowercase.
    """
    hidden_cells: Set[Coord] = set()
    if show_hidden and placed_words:
        for placed in placed_words:
            hidden_cells.update(placed.path)

    lines = []
    for y, row in enumerate(grid.cells):
        parts = []
        for x, cell in enumerate(row):
            letter = cell.letter.lower() if (x, y) in hidden_cells else cell.letter
            parts.append(f"[{letter}]" if cell.special == "gold" else f" {letter} ")
        lines.append(''.join(parts).rstrip())

    return '\n'.join(lines)

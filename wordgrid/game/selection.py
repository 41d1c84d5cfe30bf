"""Tracking of the player's in-progress tile selection."""

from typing import List, Tuple
from pydantic import BaseModel, Field

from ..puzzle.models import Coord, is_adjacent


class SelectionPathTracker(BaseModel):
    """
    The ordered, duplicate-free sequence of tiles the player has selected.

    Every tile after the first touches its predecessor. Tiles already in the
    path cannot be added again; re-entering the second-to-last tile undoes
    the last step.
    """

    steps: List[Tuple[Coord, str]] = Field(default_factory=list)

    @property
    def path(self) -> List[Coord]:
        """Selected coordinates in order."""
        return [coord for coord, _ in self.steps]

    @property
    def is_empty(self) -> bool:
        return not self.steps

    def __len__(self) -> int:
        return len(self.steps)

    def contains(self, coord: Coord) -> bool:
        return any(c == coord for c, _ in self.steps)

    def try_add(self, coord: Coord, letter: str) -> bool:
        """
        Append a tile if it is new and adjacent to the last one.

        Returns:
            True if the tile was added
        """
        coord = Coord(*coord)
        if self.contains(coord):
            return False
        if self.steps and not is_adjacent(self.steps[-1][0], coord):
            return False

        self.steps.append((coord, letter.upper()))
        return True

    def try_retract_to(self, coord: Coord) -> bool:
        """
        Undo the last step when the pointer moves back onto the previous tile.

        Returns:
            True if the last tile was removed
        """
        if len(self.steps) > 1 and self.steps[-2][0] == tuple(coord):
            self.steps.pop()
            return True
        return False

    def current_word(self) -> str:
        return ''.join(letter for _, letter in self.steps)

    def clear(self) -> None:
        self.steps = []

"""Level table loading and lookup."""

from pathlib import Path
from typing import Dict, List, Optional
from pydantic import BaseModel, Field

from ..data import DEFAULT_LEVELS_FILE
from .models import LevelInfo


def parse_level_rows(text: str) -> List[LevelInfo]:
    """
    Parse ``level,goal,time_limit_sec`` CSV text.

    The first line is a header and is skipped. Rows with a missing or
    non-integer field are dropped.
    """
    rows: List[LevelInfo] = []
    lines = text.splitlines()[1:]

    for line in lines:
        fields = [f.strip() for f in line.strip().split(',')]
        if len(fields) < 2:
            continue
        try:
            level = int(fields[0])
            goal = int(fields[1])
            time_limit = int(fields[2]) if len(fields) > 2 and fields[2] else 0
        except ValueError:
            continue
        if level < 1 or goal < 0:
            continue
        rows.append(LevelInfo(level=level, goal=goal, time_limit_sec=time_limit))

    return rows


class LevelTable(BaseModel):
    """Ordered level definitions."""

    levels: List[LevelInfo] = Field(default_factory=list)

    @classmethod
    def from_csv_text(cls, text: str) -> "LevelTable":
        return cls(levels=parse_level_rows(text))

    @classmethod
    def from_file(cls, path: Optional[str | Path] = None) -> "LevelTable":
        """Load a level table from disk, defaulting to the packaged table."""
        path = Path(path) if path else DEFAULT_LEVELS_FILE
        return cls.from_csv_text(path.read_text(encoding="utf-8"))

    @property
    def by_level(self) -> Dict[int, LevelInfo]:
        # First row wins for duplicate level numbers
        table: Dict[int, LevelInfo] = {}
        for info in self.levels:
            table.setdefault(info.level, info)
        return table

    def lookup(self, level: int) -> Optional[LevelInfo]:
        """The definition for ``level``, or None when the campaign has no such level."""
        return self.by_level.get(level)

    @property
    def last_level(self) -> int:
        return max((info.level for info in self.levels), default=0)

    def __len__(self) -> int:
        return len(self.levels)

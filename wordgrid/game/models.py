"""
Pydantic models for the game layer.

Configuration, submission outcomes, progress snapshots and session results.
The stateful classes (GameProgressionState, SelectionPathTracker, GameRound)
live in their own modules.
"""

from typing import List, Literal, Optional, Tuple
from pydantic import BaseModel, Field

from ..puzzle.models import Coord


# Type aliases
OutcomeKind = Literal["too_short", "already_found", "invalid", "valid"]


class LevelInfo(BaseModel):
    """One row of the level table."""
    level: int = Field(..., ge=1)
    goal: int = Field(..., ge=0)
    time_limit_sec: int = 0  # Carried for compatibility; play is goal-based


class SubmissionOutcome(BaseModel):
    """Result of submitting the current selection."""
    kind: OutcomeKind
    word: str = ""
    path: Tuple[Coord, ...] = ()
    is_hidden: bool = False
    points: int = 0
    multiplier: int = 1
    goal_reached: bool = False
    level: int = 1

    @property
    def accepted(self) -> bool:
        return self.kind == "valid"

    @property
    def message(self) -> str:
        """Short player-facing description of the outcome."""
        if self.kind == "too_short":
            return "Too short"
        if self.kind == "already_found":
            return f"'{self.word}' already found"
        if self.kind == "invalid":
            return f"'{self.word}' is not a word"
        bonus = " (hidden word!)" if self.is_hidden else ""
        return f"'{self.word}' +{self.points}{bonus}"


class ProgressSnapshot(BaseModel):
    """Read-only view of progression for display."""
    score: int = 0
    level: int = 1
    goal: int = 0
    found_words: List[str] = Field(default_factory=list)
    campaign_complete: bool = False


class GameConfig(BaseModel):
    """Configuration for a game session."""
    start_level: int = Field(default=1, ge=1)
    grid_size: int = Field(default=5, ge=1)
    seed: Optional[int] = None
    words_file: Optional[str] = None
    hidden_words_file: Optional[str] = None
    levels_file: Optional[str] = None
    show_hidden_words: bool = False


class SessionResult(BaseModel):
    """Summary of a complete play session."""
    config: GameConfig
    levels_completed: List[int] = Field(default_factory=list)
    campaign_complete: bool = False
    final_state: ProgressSnapshot = Field(default_factory=ProgressSnapshot)
    submissions: List[SubmissionOutcome] = Field(default_factory=list)
    words_accepted: int = 0
    total_points: int = 0
    started_at: str = ""
    ended_at: str = ""
    duration_seconds: float = 0.0

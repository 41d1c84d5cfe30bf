"""Game rules and orchestration for wordgrid."""

from .models import (
    OutcomeKind,
    LevelInfo,
    SubmissionOutcome,
    ProgressSnapshot,
    GameConfig,
    SessionResult,
)
from .selection import SelectionPathTracker
from .scoring import score, base_points, special_multiplier, MIN_WORD_LENGTH
from .progression import GameProgressionState
from .levels import LevelTable, parse_level_rows
from .round import GameRound

__all__ = [
    "OutcomeKind",
    "LevelInfo",
    "SubmissionOutcome",
    "ProgressSnapshot",
    "GameConfig",
    "SessionResult",
    "SelectionPathTracker",
    "score",
    "base_points",
    "special_multiplier",
    "MIN_WORD_LENGTH",
    "GameProgressionState",
    "LevelTable",
    "parse_level_rows",
    "GameRound",
]

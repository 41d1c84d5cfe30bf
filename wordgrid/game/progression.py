"""Score, level and found-word state for a campaign."""

from typing import List
from pydantic import BaseModel, Field

from .models import ProgressSnapshot


class GameProgressionState(BaseModel):
    """
    Per-level progress.

    Score only grows within a level. ``reset_for_new_level`` clears score,
    goal and found words but keeps the level number; ``advance_level`` bumps
    the level and leaves everything else alone.

    Attributes:
        score: Points earned in the current level
        level: Current level number (1-based)
        goal: Score needed to complete the level
        found_words: Words credited this level, in the order they were found
    """

    score: int = Field(default=0, ge=0)
    level: int = Field(default=1, ge=1)
    goal: int = Field(default=0, ge=0)
    found_words: List[str] = Field(default_factory=list)

    @classmethod
    def create(cls, start_level: int = 1) -> "GameProgressionState":
        return cls(level=start_level)

    def set_goal(self, goal: int) -> None:
        if goal < 0:
            raise ValueError(f"Goal must be non-negative (got {goal})")
        self.goal = goal

    def add_score(self, points: int) -> None:
        if points < 0:
            raise ValueError(f"Cannot add negative points ({points})")
        self.score += points

    def is_word_found(self, word: str) -> bool:
        return word in self.found_words

    def add_found_word(self, word: str) -> None:
        """Record a word; adding a word twice has no effect."""
        if not self.is_word_found(word):
            self.found_words.append(word)

    def check_goal_reached(self) -> bool:
        return self.score >= self.goal

    def advance_level(self) -> None:
        self.level += 1

    def reset_for_new_level(self) -> None:
        self.score = 0
        self.goal = 0
        self.found_words = []

    def snapshot(self) -> ProgressSnapshot:
        """A detached copy of the current progress for display."""
        return ProgressSnapshot(
            score=self.score,
            level=self.level,
            goal=self.goal,
            found_words=list(self.found_words),
        )

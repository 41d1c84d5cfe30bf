import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from ..puzzle.dictionary import Dictionary
from ..puzzle.generator import PuzzleGridGenerator
from ..puzzle.grid import render_grid
from ..puzzle.models import Coord, GenerationResult, Grid, PlacedWord, rotate_coord
from .levels import LevelTable
from .models import GameConfig, LevelInfo, ProgressSnapshot, SessionResult, SubmissionOutcome
from .progression import GameProgressionState
from .scoring import MIN_WORD_LENGTH, score, special_multiplier
from .selection import SelectionPathTracker

logger = logging.getLogger(__name__)


class GameRound(BaseModel):
    """
    Top-level orchestrator for a word-grid campaign.

    Owns the board, the player's selection and the progression state, and
    runs the submission protocol: length check, repeat check, dictionary
    check, then scoring. Boards are built completely before being published
    so callers never see a half-built grid.

    Attributes:
        config: Session configuration
        dictionary: Accepted and hidden words
        levels: Level table driving goals
        generator: Board generator
        progression: Score, level, goal and found words
        selection: The in-progress tile selection
        board: The current board and its hidden-word placements
        level_info: Level table row for the level in play
        campaign_complete: True once a requested level is missing from the table
        levels_completed: Levels finished this session
        history: Every submission made this session
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: GameConfig = Field(default_factory=GameConfig)
    dictionary: Dictionary
    levels: LevelTable = Field(default_factory=LevelTable)
    generator: Optional[PuzzleGridGenerator] = None
    progression: Optional[GameProgressionState] = None
    selection: SelectionPathTracker = Field(default_factory=SelectionPathTracker)
    board: Optional[GenerationResult] = None
    level_info: Optional[LevelInfo] = None
    campaign_complete: bool = False
    levels_completed: List[int] = Field(default_factory=list)
    history: List[SubmissionOutcome] = Field(default_factory=list)
    started_at: Optional[datetime] = None

    def model_post_init(self, __context) -> None:
        """Create the generator and starting level from config unless given explicitly."""
        if self.generator is None:
            self.generator = PuzzleGridGenerator(seed=self.config.seed)
        if self.progression is None:
            self.progression = GameProgressionState.create(start_level=self.config.start_level)

    @classmethod
    def create(
        cls,
        config: Optional[GameConfig] = None,
        dictionary: Optional[Dictionary] = None,
        levels: Optional[LevelTable] = None,
        **config_kwargs: Any
    ) -> "GameRound":
        """
        Factory method to create a round from configuration.

        Word lists and the level table are loaded from the configured files
        (or the packaged defaults) unless passed in directly.

        Args:
            config: Optional GameConfig instance
            dictionary: Optional pre-built Dictionary
            levels: Optional pre-built LevelTable
            **config_kwargs: Config parameters if config not provided

        Returns:
            A GameRound ready for ``setup_level``
        """
        if config is None:
            config = GameConfig(**config_kwargs)

        if dictionary is None:
            dictionary = Dictionary.from_files(config.words_file, config.hidden_words_file)
        if levels is None:
            levels = LevelTable.from_file(config.levels_file)

        return cls(config=config, dictionary=dictionary, levels=levels)

    @property
    def grid(self) -> Optional[Grid]:
        return self.board.grid if self.board else None

    @property
    def placed_words(self) -> List[PlacedWord]:
        return list(self.board.placed_words) if self.board else []

    def _require_board(self) -> GenerationResult:
        if self.board is None:
            if self.campaign_complete:
                raise ValueError("Campaign is complete; no board in play")
            raise ValueError("No board in play. Call setup_level() first.")
        return self.board

    def setup_level(self, level: Optional[int] = None) -> bool:
        """
        Prepare a level: reset progress, set its goal and build a new board.

        Args:
            level: Level number to set up (defaults to the current level)

        Returns:
            True if the level exists, False if the campaign is complete
        """
        if self.started_at is None:
            self.started_at = datetime.now()

        if level is not None:
            self.progression.level = level

        info = self.levels.lookup(self.progression.level)
        self.selection.clear()

        if info is None:
            logger.info("No level %d in the level table; campaign complete", self.progression.level)
            self.campaign_complete = True
            self.level_info = None
            self.board = None
            return False

        self.progression.reset_for_new_level()
        self.progression.set_goal(info.goal)

        board = self.generator.generate(self.dictionary.hidden_words, self.config.grid_size)
        self.board = board
        self.level_info = info

        logger.info(
            "Level %d ready: goal %d, %d hidden word(s) placed",
            info.level, info.goal, len(board.placed_words)
        )
        return True

    def begin_selection(self, coord: Coord) -> bool:
        """Start a new selection at ``coord``, discarding any previous one."""
        grid = self._require_board().grid
        self.selection.clear()
        if not grid.in_bounds(coord):
            return False
        return self.selection.try_add(Coord(*coord), grid.letter_at(coord))

    def select_tile(self, coord: Coord) -> bool:
        """
        Extend the selection with the tile at ``coord``.

        Moving back onto the second-to-last selected tile removes the last
        one; any other already-selected tile is ignored.

        Returns:
            True if the selection changed
        """
        grid = self._require_board().grid
        if not grid.in_bounds(coord):
            return False
        coord = Coord(*coord)
        if self.selection.contains(coord):
            return self.selection.try_retract_to(coord)
        return self.selection.try_add(coord, grid.letter_at(coord))

    def clear_selection(self) -> None:
        self.selection.clear()

    def submit(self) -> SubmissionOutcome:
        """
        Evaluate the current selection and clear it.

        Returns:
            SubmissionOutcome describing what happened
        """
        board = self._require_board()
        word = self.selection.current_word()
        path = tuple(self.selection.path)
        level = self.progression.level

        if len(word) < MIN_WORD_LENGTH:
            outcome = SubmissionOutcome(kind="too_short", word=word, path=path, level=level)
        elif self.progression.is_word_found(word):
            outcome = SubmissionOutcome(kind="already_found", word=word, path=path, level=level)
        elif self.dictionary.is_valid_word(word):
            self.progression.add_found_word(word)
            is_hidden = board.find_placed(word) is not None
            multiplier = special_multiplier(board.grid, path)
            points = score(word, is_hidden, multiplier)
            self.progression.add_score(points)
            outcome = SubmissionOutcome(
                kind="valid",
                word=word,
                path=path,
                is_hidden=is_hidden,
                points=points,
                multiplier=multiplier,
                goal_reached=self.progression.check_goal_reached(),
                level=level,
            )
        else:
            outcome = SubmissionOutcome(kind="invalid", word=word, path=path, level=level)

        logger.debug("Submitted %r: %s", word, outcome.kind)
        if outcome.goal_reached:
            logger.info("Level %d goal reached with %d points", level, self.progression.score)

        self.selection.clear()
        self.history.append(outcome)
        return outcome

    def submit_path(self, coords: Iterable[Coord]) -> SubmissionOutcome:
        """
        Select the given tiles in order and submit them.

        Tiles that cannot extend the selection are skipped, exactly as
        they would be during a swipe.
        """
        coords = list(coords)
        if coords:
            self.begin_selection(coords[0])
            for coord in coords[1:]:
                self.select_tile(coord)
        else:
            self.selection.clear()
        return self.submit()

    def rotate_board(self) -> Grid:
        """
        Turn the board a quarter turn clockwise.

        The selection is cleared and hidden-word paths move with their letters.

        Returns:
            The rotated grid
        """
        board = self._require_board()
        self.selection.clear()

        size = board.grid.size
        rotated = GenerationResult(
            grid=board.grid.rotated(),
            placed_words=tuple(
                PlacedWord(word=p.word, path=tuple(rotate_coord(c, size) for c in p.path))
                for p in board.placed_words
            ),
            dropped_words=board.dropped_words,
        )
        self.board = rotated
        return rotated.grid

    def complete_level(self) -> bool:
        """
        Move on after the goal is reached.

        Returns:
            True if the next level was set up, False if the campaign is complete

        Raises:
            ValueError: If the current level's goal has not been reached
        """
        self._require_board()
        if not self.progression.check_goal_reached():
            raise ValueError(
                f"Level {self.progression.level} goal not reached "
                f"({self.progression.score}/{self.progression.goal})"
            )

        self.levels_completed.append(self.progression.level)
        self.progression.advance_level()
        return self.setup_level()

    def snapshot(self) -> ProgressSnapshot:
        snap = self.progression.snapshot()
        snap.campaign_complete = self.campaign_complete
        return snap

    def render(self, show_hidden: Optional[bool] = None) -> str:
        """Render the current board as text."""
        board = self._require_board()
        if show_hidden is None:
            show_hidden = self.config.show_hidden_words
        return render_grid(board.grid, board.placed_words, show_hidden=show_hidden)

    def get_state(self) -> Dict:
        """
        Get the current round state as a dictionary.

        Useful for serialization and logging.
        """
        return {
            "level": self.progression.level,
            "score": self.progression.score,
            "goal": self.progression.goal,
            "found_words": list(self.progression.found_words),
            "campaign_complete": self.campaign_complete,
            "board": self.grid.rows() if self.grid else None,
            "hidden_words": [p.word for p in self.placed_words],
            "selection": self.selection.current_word(),
            "submissions": len(self.history),
        }

    def get_result(self) -> SessionResult:
        """Summarise the session so far."""
        ended_at = datetime.now()
        duration = (ended_at - self.started_at).total_seconds() if self.started_at else 0.0

        return SessionResult(
            config=self.config,
            levels_completed=list(self.levels_completed),
            campaign_complete=self.campaign_complete,
            final_state=self.snapshot(),
            submissions=list(self.history),
            words_accepted=sum(1 for o in self.history if o.accepted),
            total_points=sum(o.points for o in self.history),
            started_at=self.started_at.isoformat() if self.started_at else "",
            ended_at=ended_at.isoformat(),
            duration_seconds=duration,
        )

    def save_result(self, path: str | Path) -> None:
        """
        Save the session result to a JSON file.

        Args:
            path: Path to save the result file
        """
        result = self.get_result()
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w') as f:
            json.dump(result.model_dump(), f, indent=2, default=str)

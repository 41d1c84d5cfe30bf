"""Shared fixtures: a round with a fixed, known board."""

import pytest

from wordgrid.game import GameConfig, GameRound, LevelTable
from wordgrid.puzzle import Coord, Dictionary, GenerationResult, Grid, PlacedWord


# C A T X X
# D O G X X
# X X X X X
# X X X X X
# X X X X Q
BOARD = [
    ["C", "A", "T", "X", "X"],
    ["D", "O", "G", "X", "X"],
    ["X", "X", "X", "X", "X"],
    ["X", "X", "X", "X", "X"],
    ["X", "X", "X", "X", "Q"],
]

LEVELS_CSV = """level,goal,time_limit_sec
1,3,120
2,5,120
"""

VALID_WORDS = ["CAT", "DOG", "COD", "ACT", "GOD", "TOGA"]
HIDDEN_WORDS = ["CAT", "DOG"]

CAT_PATH = (Coord(0, 0), Coord(1, 0), Coord(2, 0))
COD_PATH = (Coord(0, 0), Coord(1, 1), Coord(0, 1))


def install_board(game: GameRound, gold: Coord = Coord(4, 4)) -> None:
    """Replace the generated board with the fixed one, CAT hidden along the top row."""
    game.board = GenerationResult(
        grid=Grid.from_letters(BOARD, gold=gold),
        placed_words=(PlacedWord(word="CAT", path=CAT_PATH),),
    )


@pytest.fixture
def dictionary() -> Dictionary:
    return Dictionary(valid_words=VALID_WORDS, hidden_words=HIDDEN_WORDS)


@pytest.fixture
def levels() -> LevelTable:
    return LevelTable.from_csv_text(LEVELS_CSV)


@pytest.fixture
def fixed_round(dictionary, levels) -> GameRound:
    """A round on level 1 (goal 3) with the fixed board and the gold tile out of the way."""
    game = GameRound(config=GameConfig(seed=3), dictionary=dictionary, levels=levels)
    assert game.setup_level() is True
    install_board(game)
    return game

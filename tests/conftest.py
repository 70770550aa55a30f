import os

os.environ.setdefault("MPLBACKEND", "Agg")

import pytest

from tictactoe import config
from tictactoe.core.board import Board
from tictactoe.types import Cell

_GLYPHS = {"X": Cell.CROSS, "O": Cell.NOUGHT, "_": Cell.EMPTY, " ": Cell.EMPTY}


def make_board(rows, win_row_length=None):
    """Build a board from strings like ["XOX", "OX_", "O_X"]."""
    return Board.from_rows([[_GLYPHS[ch] for ch in row] for row in rows], win_row_length)


@pytest.fixture
def board_from():
    return make_board


@pytest.fixture(autouse=True)
def quiet_ui(monkeypatch):
    monkeypatch.setattr(config, "USE_COLOR", False)
    monkeypatch.setattr(config, "CLEAR_SCREEN", False)
    monkeypatch.setattr(config, "AI_THINK_DELAY_SEC", 0)
    monkeypatch.setattr(config, "RESPONSE_PAUSE_SEC", 0)

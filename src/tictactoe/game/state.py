from __future__ import annotations
from dataclasses import dataclass

from tictactoe.core.board import Board
from tictactoe.types import Cell, Side


@dataclass(slots=True)
class GameState:
    board: Board
    current: Side = Cell.CROSS
    last_status: str = "Player X starts."

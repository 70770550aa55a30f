from __future__ import annotations
from typing import Protocol

from tictactoe.game.state import GameState
from tictactoe.types import Move


class Agent(Protocol):
    """A player for the side in `state.current`.

    `choose_move` returns the `Move(row, col)` of an empty cell and leaves the
    board untouched; the turn loop places it. `name` shows in the game header
    and the league standings.
    """

    name: str

    def choose_move(self, state: GameState) -> Move:
        ...

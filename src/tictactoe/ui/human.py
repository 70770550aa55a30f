from __future__ import annotations

from tictactoe.types import Move
from tictactoe.game.state import GameState


class HumanAgent:
    name = "Human"

    def choose_move(self, state: GameState) -> Move:
        raise RuntimeError("HumanAgent.choose_move should never be called; the turn loop reads input instead.")

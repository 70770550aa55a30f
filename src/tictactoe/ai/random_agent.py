from __future__ import annotations

import random
import time
from dataclasses import dataclass, field

from tictactoe.core.search import pick_random
from tictactoe.game.state import GameState
from tictactoe.types import Move


@dataclass(slots=True)
class RandomAgent:
    name: str = "Random AI"
    rng: random.Random = field(default_factory=random.Random)
    last_info: dict = field(default_factory=dict)

    def choose_move(self, state: GameState) -> Move:
        start = time.perf_counter()
        move = pick_random(state.board, self.rng)
        elapsed = time.perf_counter() - start

        self.last_info = {
            "move": move,
            "nodes": 0,
            "time_ms": max(1, int(elapsed * 1000)),
        }
        return move

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field
from typing import Optional

from tictactoe.core.search import SearchStats, pick_perfect
from tictactoe.game.state import GameState
from tictactoe.types import Move

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PerfectAgent:
    """
    Exhaustive negamax player. Never loses, but only tractable on small boards.

    With `shuffle_ties` it picks uniformly among equally good cells instead of
    the first one in row-major order, which makes self-play less repetitive.
    """
    name: str = "Perfect AI"
    shuffle_ties: bool = False
    rng: random.Random = field(default_factory=random.Random)

    # Stats
    last_info: dict = field(default_factory=dict)

    def choose_move(self, state: GameState) -> Move:
        stats = SearchStats()
        start = time.perf_counter()

        rng: Optional[random.Random] = self.rng if self.shuffle_ties else None
        move = pick_perfect(state.board, state.current, rng=rng, stats=stats)

        elapsed = time.perf_counter() - start
        self.last_info = {
            "move": move,
            "nodes": stats.nodes,
            "time_ms": max(1, int(elapsed * 1000)),
        }
        logger.info("%s searched %d nodes in %dms", self.name, stats.nodes, self.last_info["time_ms"])
        return move

from __future__ import annotations

import logging
import random
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, List, Optional, Tuple

from tictactoe.types import Cell, Move, Side, Tie, Winner, other

if TYPE_CHECKING:
    from tictactoe.core.board import Board

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SearchStats:
    nodes: int = 0


@contextmanager
def placed(board: Board, side: Side, row: int, col: int) -> Iterator[None]:
    """Place `side` at (row, col) for the duration of the block, then clear it again."""
    board.set(side, row, col)
    try:
        yield
    finally:
        board.undo(row, col)


def move_value(board: Board, side: Side, row: int, col: int, stats: Optional[SearchStats] = None) -> int:
    """
    Negamax value of `side` playing (row, col), scored for the side that just moved:
    +1 win, 0 tie, -1 loss. Exhaustive, no pruning and no memoization.
    The board is left exactly as it was found.
    """
    if board.get(row, col) is not Cell.EMPTY:
        raise ValueError(f"move_value needs an empty cell, got ({row}, {col}).")

    if stats is not None:
        stats.nodes += 1

    with placed(board, side, row, col):
        status = board.status()
        if isinstance(status, Winner):
            return 1 if status.side is side else -1
        if isinstance(status, Tie):
            return 0

        opp = other(side)
        # The opponent picks whatever is best for them; that is the worst for us.
        return -max(move_value(board, opp, r, c, stats) for r, c in board.empty_cells())


def scored_moves(board: Board, side: Side, stats: Optional[SearchStats] = None) -> List[Tuple[Move, int]]:
    return [(m, move_value(board, side, m.row, m.col, stats)) for m in board.empty_cells()]


def pick_perfect(
    board: Board,
    side: Side,
    rng: Optional[random.Random] = None,
    stats: Optional[SearchStats] = None,
) -> Move:
    scored = scored_moves(board, side, stats)
    if not scored:
        raise ValueError("No empty cells.")

    best = max(score for _, score in scored)
    candidates = [m for m, score in scored if score == best]
    move = rng.choice(candidates) if rng is not None else candidates[0]

    logger.debug("perfect move for %s: %s value=%d (%d maximisers)", side.glyph, move, best, len(candidates))
    return move


def pick_random(board: Board, rng: Optional[random.Random] = None) -> Move:
    moves = board.empty_cells()
    if not moves:
        raise ValueError("No empty cells.")
    return (rng or random).choice(moves)

from __future__ import annotations
from typing import TYPE_CHECKING, List, Optional, Tuple

from tictactoe.types import Cell, Continue, GameStatus, Side, Tie, Winner

if TYPE_CHECKING:
    from tictactoe.core.board import Board

Coord = Tuple[int, int]  # (row, col)

# Both signs of every axis: vertical, horizontal, and the two diagonals.
DIRECTIONS: Tuple[Coord, ...] = (
    (1, 0), (-1, 0),
    (0, 1), (0, -1),
    (1, 1), (1, -1),
    (-1, 1), (-1, -1),
)


def line_coords(board: Board, start: Coord, direction: Coord) -> List[Coord]:
    r, c = start
    dr, dc = direction
    return [(r + i * dr, c + i * dc) for i in range(board.win_row_length)]


def _completes_line(board: Board, side: Side, r: int, c: int, dr: int, dc: int) -> bool:
    for i in range(1, board.win_row_length):
        # Off-board probes come back as None and break the line.
        if board.get(r + i * dr, c + i * dc) is not side:
            return False
    return True


def check_winner_with_line(board: Board) -> Optional[Tuple[Side, List[Coord]]]:
    for r, c, side in board.cells():
        if side is Cell.EMPTY:
            continue
        for dr, dc in DIRECTIONS:
            if _completes_line(board, side, r, c, dr, dc):
                return side, line_coords(board, (r, c), (dr, dc))
    return None


def check_winner(board: Board) -> Optional[Side]:
    res = check_winner_with_line(board)
    return res[0] if res else None


def board_status(board: Board) -> GameStatus:
    w = check_winner(board)
    if w is not None:
        return Winner(w)
    if board.is_full():
        return Tie()
    return Continue()

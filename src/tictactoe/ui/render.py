from __future__ import annotations
from typing import Iterable, List, Optional, Set, Tuple

from tictactoe import config
from tictactoe.core.board import Board
from tictactoe.types import Cell
from tictactoe.ui.colors import c, BOLD, DIM, FG_CYAN, FG_RED, FG_YELLOW, REVERSE

Coord = Tuple[int, int]

HORIZONTAL = "="
VERTICAL = "|"


def _piece(cell: Cell) -> str:
    if cell is Cell.CROSS:
        return c(cell.glyph, FG_RED)
    if cell is Cell.NOUGHT:
        return c(cell.glyph, FG_YELLOW)
    return cell.glyph


def board_lines(board: Board, highlight: Optional[Iterable[Coord]] = None) -> List[str]:
    hl: Set[Coord] = set(highlight) if highlight else set()

    pad = len(str(board.length - 1))
    indent = " " * (pad + 1)

    # Column labels sit above the glyphs; x runs along a row, y down the columns.
    nums = indent + " " + " ".join(str(i % 10) for i in range(board.length))
    rule = indent + HORIZONTAL * (2 * board.length + 1)

    lines = [c(nums, DIM)]
    for r, row in enumerate(board.rows()):
        lines.append(c(rule, DIM))
        parts = []
        for cidx, cell in enumerate(row):
            p = _piece(cell)
            if (r, cidx) in hl:
                p = c(cell.glyph, REVERSE + BOLD)
            parts.append(p)
        lines.append(f"{r:>{pad}} " + VERTICAL + VERTICAL.join(parts) + VERTICAL)
    lines.append(c(rule, DIM))
    return lines


def clear_screen() -> None:
    if config.CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def render(board: Board, status: str = "", highlight: Optional[Iterable[Coord]] = None) -> None:
    clear_screen()

    print(c("TIC-TAC-TOE", BOLD) + c(f"  ({board.win_row_length} in a row)", DIM))
    if status:
        print(c(status, FG_CYAN))
    else:
        print()

    for line in board_lines(board, highlight):
        print(line)

    print(c("   Enter x, y to place (column, row). Enter q to quit.", DIM))
    print()

# src/tictactoe/core/board.py

from __future__ import annotations
import random
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence, Tuple

from tictactoe.config import BOARD_SIZE, WIN_ROW_LENGTH
from tictactoe.core.errors import AlreadyOccupied, ColumnOutOfBounds, RowOutOfBounds
from tictactoe.core import rules, search
from tictactoe.types import Cell, GameStatus, Move, Side


@dataclass(slots=True)
class Board:
    length: int = BOARD_SIZE
    win_row_length: int = WIN_ROW_LENGTH
    grid: List[List[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.length < 1:
            raise ValueError("Board length must be at least 1.")
        if not 1 <= self.win_row_length <= self.length:
            raise ValueError(f"Win row length must be between 1 and {self.length}.")
        if not self.grid:
            self.grid = [[Cell.EMPTY for _ in range(self.length)] for _ in range(self.length)]
        elif len(self.grid) != self.length or any(len(row) != self.length for row in self.grid):
            raise ValueError(f"Grid must be {self.length}x{self.length}.")

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Cell]], win_row_length: Optional[int] = None) -> "Board":
        length = len(rows)
        win = length if win_row_length is None else win_row_length
        return cls(length, win, [list(row) for row in rows])

    def copy(self) -> "Board":
        return Board(self.length, self.win_row_length, [row[:] for row in self.grid])

    def get(self, row: int, col: int) -> Optional[Cell]:
        """Cell at (row, col), or None when either coordinate is off the board."""
        if 0 <= row < self.length and 0 <= col < self.length:
            return self.grid[row][col]
        return None

    def set(self, side: Side, row: int, col: int) -> None:
        if side is Cell.EMPTY:
            raise ValueError("Only a side can be placed on the board.")
        if not 0 <= row < self.length:
            raise RowOutOfBounds(row, col)
        if not 0 <= col < self.length:
            raise ColumnOutOfBounds(row, col)
        if self.grid[row][col] is not Cell.EMPTY:
            raise AlreadyOccupied(row, col)
        self.grid[row][col] = side

    def undo(self, row: int, col: int) -> None:
        """
        Clear a placed cell.
        Used by the move search to revert its temporary placements.
        """
        if self.get(row, col) in (None, Cell.EMPTY):
            raise ValueError(f"Cannot undo: cell ({row}, {col}) is empty.")
        self.grid[row][col] = Cell.EMPTY

    def rows(self) -> Tuple[Tuple[Cell, ...], ...]:
        return tuple(tuple(row) for row in self.grid)

    def cells(self) -> Iterator[Tuple[int, int, Cell]]:
        for r, row in enumerate(self.grid):
            for c, cell in enumerate(row):
                yield r, c, cell

    def empty_cells(self) -> List[Move]:
        return [Move(r, c) for r, c, cell in self.cells() if cell is Cell.EMPTY]

    def is_full(self) -> bool:
        return all(cell is not Cell.EMPTY for row in self.grid for cell in row)

    def status(self) -> GameStatus:
        return rules.board_status(self)

    def random_move(self, side: Side, rng: Optional[random.Random] = None) -> Move:
        move = search.pick_random(self, rng)
        self.set(side, move.row, move.col)
        return move

    def perfect_move(self, side: Side, rng: Optional[random.Random] = None) -> Move:
        move = search.pick_perfect(self, side, rng=rng)
        self.set(side, move.row, move.col)
        return move

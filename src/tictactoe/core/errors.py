from __future__ import annotations


class MoveError(ValueError):
    """Base class for a rejected `Board.set` call. The board is left untouched."""

    message = "Illegal move."

    def __init__(self, row: int, col: int) -> None:
        self.row = row
        self.col = col
        super().__init__(self.message)


class RowOutOfBounds(MoveError):
    message = "Row index out of bounds."


class ColumnOutOfBounds(MoveError):
    message = "Column index out of bounds."


class AlreadyOccupied(MoveError):
    message = "Already occupied tile."

# src/tictactoe/types.py

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional, Union


class Cell(Enum):
    EMPTY = " "
    CROSS = "X"
    NOUGHT = "O"

    @property
    def glyph(self) -> str:
        return self.value

    def opposite(self) -> Optional["Cell"]:
        if self is Cell.CROSS:
            return Cell.NOUGHT
        if self is Cell.NOUGHT:
            return Cell.CROSS
        return None


Side = Cell  # Cell.CROSS or Cell.NOUGHT, never Cell.EMPTY


def other(side: Side) -> Side:
    opp = side.opposite()
    if opp is None:
        raise ValueError("Empty has no opposite side.")
    return opp


class Move(NamedTuple):
    row: int
    col: int


@dataclass(frozen=True, slots=True)
class Winner:
    side: Side


@dataclass(frozen=True, slots=True)
class Tie:
    pass


@dataclass(frozen=True, slots=True)
class Continue:
    pass


GameStatus = Union[Winner, Tie, Continue]

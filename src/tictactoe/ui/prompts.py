from __future__ import annotations
from typing import Optional

from tictactoe.types import Move


def parse_move(raw: str) -> Optional[Move]:
    """
    Parse "x, y" (column, row; 0-based) into a Move.
    Returns None when the player asks to quit. Range checks are left to Board.set.
    """
    s = raw.strip().lower()
    if s in {"q", "quit", "exit"}:
        return None

    sep = "," if "," in s else None
    parts = [p.strip() for p in s.split(sep)]
    try:
        coords = [int(p) for p in parts]
    except ValueError:
        raise ValueError("You need to input proper numbers.") from None

    if len(coords) != 2:
        raise ValueError("Incorrect number of arguments. Enter x, y or q.")

    x, y = coords
    return Move(row=y, col=x)

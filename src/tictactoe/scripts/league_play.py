from __future__ import annotations

import random
from typing import Dict, Tuple

from tictactoe.core.board import Board
from tictactoe.game.state import GameState
from tictactoe.types import Cell, Continue, Tie, Winner, other

from .league_types import Agg

Stats = Dict[str, Dict[str, int]]


def seed_agent(agent, seed: int) -> None:
    rng = getattr(agent, "rng", None)
    if isinstance(rng, random.Random):
        rng.seed(seed)


def play_headless(
    agent_x,
    agent_o,
    length: int = 3,
    win_row_length: int = 3,
    seed_base: int = 0,
    openings: int = 0,
) -> Tuple[str, Stats]:
    """
    Play one game without any rendering.
    The first `openings` plies are random so repeated pairings do not replay the same game.
    Returns ("X" | "O" | "D", per-side stats).
    """
    state = GameState(board=Board(length, win_row_length), current=Cell.CROSS, last_status="")
    stats: Stats = {
        "X": {"moves": 0, "time_ms": 0, "nodes": 0},
        "O": {"moves": 0, "time_ms": 0, "nodes": 0},
    }

    seed_agent(agent_x, seed_base + 101)
    seed_agent(agent_o, seed_base + 202)

    rng = random.Random(seed_base)
    for _ in range(openings):
        if not isinstance(state.board.status(), Continue):
            break
        state.board.random_move(state.current, rng)
        state.current = other(state.current)

    while True:
        status = state.board.status()
        if isinstance(status, Winner):
            return status.side.glyph, stats
        if isinstance(status, Tie):
            return "D", stats

        agent = agent_x if state.current is Cell.CROSS else agent_o
        move = agent.choose_move(state)

        info = getattr(agent, "last_info", None) or {}
        side_stats = stats[state.current.glyph]
        side_stats["moves"] += 1
        side_stats["time_ms"] += max(1, int(info.get("time_ms", 0)))
        side_stats["nodes"] += int(info.get("nodes", 0))

        state.board.set(state.current, move.row, move.col)
        state.current = other(state.current)


def add_result(agg_a: Agg, agg_b: Agg, outcome: str, a_is_x: bool) -> None:
    agg_a.games += 1
    agg_b.games += 1

    if outcome == "D":
        agg_a.draws += 1
        agg_b.draws += 1
        agg_a.points += 0.5
        agg_b.points += 0.5
        return

    a_won = (outcome == "X" and a_is_x) or (outcome == "O" and not a_is_x)
    winner, loser = (agg_a, agg_b) if a_won else (agg_b, agg_a)
    winner.wins += 1
    winner.points += 1.0
    loser.losses += 1
    if outcome == "X":
        winner.wins_as_x += 1
    else:
        winner.wins_as_o += 1


def add_stats(agg_a: Agg, agg_b: Agg, stats: Stats, a_is_x: bool) -> None:
    a_side, b_side = ("X", "O") if a_is_x else ("O", "X")
    for agg, side in ((agg_a, a_side), (agg_b, b_side)):
        agg.moves += stats[side]["moves"]
        agg.time_ms += stats[side]["time_ms"]
        agg.nodes += stats[side]["nodes"]


def run_pairings_batch(args):
    (batch_items, games_per_pair, length, win_row_length, openings) = args
    out = []
    for (A_name, B_name, A_make, B_make, base_seed) in batch_items:
        for g in range(games_per_pair):
            # Alternate who moves first.
            a_is_x = g % 2 == 0
            if a_is_x:
                x, o = A_make(), B_make()
            else:
                x, o = B_make(), A_make()
            outcome, stats = play_headless(
                x, o, length, win_row_length, seed_base=(base_seed + g), openings=openings,
            )
            out.append((A_name, B_name, a_is_x, outcome, stats))
    return out


def chunked(lst, size: int):
    for i in range(0, len(lst), size):
        yield lst[i : i + size]

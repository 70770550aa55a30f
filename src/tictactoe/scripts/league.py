from __future__ import annotations

import argparse
import csv
import logging
import os
import shutil
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Sequence

from tictactoe import config
from tictactoe.ui.colors import c, BOLD, DIM, FG_CYAN

from .league_play import add_result, add_stats, chunked, run_pairings_batch
from .league_roster import build_roster
from .league_scoring import avg_ms_per_move, avg_nodes_per_move, ppg, strength_score
from .league_types import Agg, Team

logger = logging.getLogger(__name__)

CSV_COLUMNS = [
    "name",
    "games", "wins", "draws", "losses",
    "points", "ppg",
    "strength_wilson_lcb",
    "wins_as_x", "wins_as_o",
    "moves", "time_ms", "nodes",
    "avg_ms_per_move", "avg_nodes_per_move",
]


# -----------------------------
# Stable terminal formatting
# -----------------------------
def term_width(default: int = 100) -> int:
    return shutil.get_terminal_size(fallback=(default, 24)).columns


def hr(char: str = "─", width: int | None = None) -> str:
    w = width or term_width()
    return char * max(10, w)


def clamp(s: str, width: int) -> str:
    if width <= 0:
        return ""
    if len(s) <= width:
        return s
    if width <= 1:
        return s[:width]
    return s[: width - 1] + "…"


@dataclass(frozen=True)
class Col:
    title: str
    width: int
    align: str = "left"  # "left" | "right"


def _fmt_row(values: Sequence[str], cols: Sequence[Col]) -> str:
    out: List[str] = []
    for v, col in zip(values, cols):
        s = clamp(str(v), col.width)
        out.append(s.rjust(col.width) if col.align == "right" else s.ljust(col.width))
    return "  ".join(out)


def print_table(title: str, cols: Sequence[Col], rows: Iterable[Sequence[str]], *, width: int) -> None:
    print(c(title, FG_CYAN + BOLD))
    print(c(_fmt_row([col.title for col in cols], cols), DIM))
    print(c(hr("─", width), DIM))
    for r in rows:
        print(_fmt_row(r, cols))
    print(c(hr("─", width), DIM))


def standings(agg: Dict[str, Agg], z: float) -> List[tuple[str, Agg]]:
    return sorted(agg.items(), key=lambda kv: (strength_score(kv[1], z), kv[1].points), reverse=True)


def print_standings(agg: Dict[str, Agg], z: float) -> None:
    w = min(term_width(), 100)
    cols = [
        Col("rk", 3, "right"),
        Col("agent", 24),
        Col("strength", 9, "right"),
        Col("ppg", 5, "right"),
        Col("g", 4, "right"),
        Col("W-D-L", 9, "right"),
        Col("ms/mv", 8, "right"),
        Col("nodes/mv", 10, "right"),
    ]

    rows = []
    for i, (name, a) in enumerate(standings(agg, z), start=1):
        rows.append([
            str(i),
            name,
            f"{strength_score(a, z):0.4f}",
            f"{ppg(a):0.3f}",
            str(a.games),
            f"{a.wins}-{a.draws}-{a.losses}",
            f"{avg_ms_per_move(a):0.1f}",
            f"{avg_nodes_per_move(a):0.0f}",
        ])

    print_table("Standings (strength = Wilson lower bound of points per game)", cols, rows, width=w)


def export_csv(agg: Dict[str, Agg], out_dir: Path, z: float) -> Path:
    out_dir.mkdir(parents=True, exist_ok=True)
    ts = time.strftime("%Y%m%d_%H%M%S")
    out_path = out_dir / f"league_results_{ts}.csv"

    with open(out_path, "w", newline="") as f:
        w = csv.writer(f)
        w.writerow(CSV_COLUMNS)
        for name, a in agg.items():
            w.writerow([
                name,
                a.games, a.wins, a.draws, a.losses,
                a.points, round(ppg(a), 6),
                round(strength_score(a, z), 6),
                a.wins_as_x, a.wins_as_o,
                a.moves, a.time_ms, a.nodes,
                round(avg_ms_per_move(a), 3), round(avg_nodes_per_move(a), 3),
            ])

    return out_path


def round_robin(
    teams: List[Team],
    games_per_pair: int = 2,
    length: int = 3,
    win_row_length: int = 3,
    openings: int = 2,
    seed: int = 1234,
    max_workers: int | None = None,
    batch_pairings: int = 4,
) -> Dict[str, Agg]:
    """
    Every team plays every other team `games_per_pair` times, alternating who is X.
    With max_workers == 1 the games run in this process.
    """
    agg: Dict[str, Agg] = {t.name: Agg() for t in teams}

    pair_items = []
    n = len(teams)
    for i in range(n):
        for j in range(i + 1, n):
            A_team, B_team = teams[i], teams[j]
            base_seed = seed + i * 10_000 + j * 100
            pair_items.append((A_team.name, B_team.name, A_team.make, B_team.make, base_seed))

    jobs = [
        (chunk, games_per_pair, length, win_row_length, openings)
        for chunk in chunked(pair_items, batch_pairings)
    ]
    logger.info("round robin: %d teams, %d pairings, %d jobs", n, len(pair_items), len(jobs))

    def apply(results) -> None:
        for (A_name, B_name, a_is_x, outcome, stats) in results:
            add_result(agg[A_name], agg[B_name], outcome, a_is_x=a_is_x)
            add_stats(agg[A_name], agg[B_name], stats, a_is_x=a_is_x)

    if max_workers == 1:
        for job in jobs:
            apply(run_pairings_batch(job))
        return agg

    if max_workers is None:
        max_workers = min(os.cpu_count() or 2, 6)

    with ProcessPoolExecutor(max_workers=max_workers) as ex:
        futures = [ex.submit(run_pairings_batch, job) for job in jobs]
        for fut in as_completed(futures):
            apply(fut.result())

    return agg


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Play every AI agent against every other and export the standings.")
    ap.add_argument("--games-per-pair", type=int, default=4, help="Games per pairing (sides alternate)")
    ap.add_argument("--size", type=int, default=config.BOARD_SIZE, help="Board length (NxN)")
    ap.add_argument("--win", type=int, default=config.WIN_ROW_LENGTH, help="Cells in a row needed to win")
    ap.add_argument("--openings", type=int, default=2, help="Random opening plies per game")
    ap.add_argument("--seed", type=int, default=1234, help="Base RNG seed")
    ap.add_argument("--max-workers", type=int, default=None, help="Worker processes (default = cpu cores, capped at 6)")
    ap.add_argument("--batch-pairings", type=int, default=4, help="Pairings per worker task")
    ap.add_argument("--z", type=float, default=1.28, help="Z for the Wilson lower confidence bound")
    ap.add_argument("--out-dir", type=str, default="data/results", help="Where league_results_*.csv is written")
    ap.add_argument("--no-csv", action="store_true", help="Skip the CSV export")
    ap.add_argument("--log-level", type=str, default="WARNING", help="Logging level (DEBUG, INFO, WARNING, ...)")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    teams = build_roster()
    print(c(f"Roster size: {len(teams)} teams", BOLD))
    print(f"Board: {args.size}x{args.size}, {args.win} in a row, {args.openings} random opening plies")
    print(c(hr("═", min(term_width(), 100)), DIM))

    start = time.perf_counter()
    agg = round_robin(
        teams,
        games_per_pair=args.games_per_pair,
        length=args.size,
        win_row_length=args.win,
        openings=args.openings,
        seed=args.seed,
        max_workers=args.max_workers,
        batch_pairings=args.batch_pairings,
    )
    elapsed = time.perf_counter() - start

    print_standings(agg, args.z)

    if not args.no_csv:
        out_path = export_csv(agg, Path(args.out_dir), args.z)
        print(f"Wrote CSV: {out_path}")

    print(c(f"Total runtime: {elapsed:0.3f}s", BOLD))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

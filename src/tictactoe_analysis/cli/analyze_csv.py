from __future__ import annotations

import argparse
from pathlib import Path
from typing import get_args

from ..io.load_results import LoadSpec, load_latest_from_dir, load_results
from ..metrics.summarize import MetricKey, SummaryConfig, filter_rows, numeric_summary, outcome_rates, top_table, unbeaten
from ..plots import plot_outcomes, plot_scatter, plot_top_bar


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Analyze tic-tac-toe league CSV results.")
    ap.add_argument("--csv", type=str, default=None, help="Path to a results CSV. If omitted, uses latest in --results-dir.")
    ap.add_argument("--results-dir", type=str, default="data/results", help="Directory containing league_results_*.csv")
    ap.add_argument("--pattern", type=str, default="league_results_*.csv", help="Glob pattern for selecting latest file")

    ap.add_argument("--outdir", type=str, default="figures", help="Directory for saving plots")
    ap.add_argument("--show", action="store_true", help="Show plots instead of saving")
    ap.add_argument("--no-plots", action="store_true", help="Print tables only")

    ap.add_argument("--top", type=int, default=20, help="Top N for tables/bar charts")
    ap.add_argument("--metric", type=str, choices=get_args(MetricKey), default="strength_wilson_lcb", help="Ranking metric")
    ap.add_argument("--min-games", type=int, default=0, help="Filter out agents with fewer than this many games")

    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    if args.csv:
        csv_path = Path(args.csv)
    else:
        csv_path = load_latest_from_dir(Path(args.results_dir), pattern=args.pattern)

    df = load_results(LoadSpec(csv_path=csv_path))

    print(f"\nLoaded: {csv_path}")
    print(f"Agents: {len(df):,}  Cols: {len(df.columns)}")

    cfg = SummaryConfig(
        metric=args.metric,  # type: ignore[arg-type]
        top_n=args.top,
        min_games=args.min_games,
    )

    table = top_table(df, cfg)
    print(f"\n=== Top by {cfg.metric} ===")
    print(table.to_string(index=False))

    filtered = filter_rows(df, cfg)
    rates = outcome_rates(filtered)
    print("\n=== Outcome rates ===")
    print(rates.to_string(index=False, float_format=lambda v: f"{v:0.3f}"))

    never_lost = unbeaten(filtered)
    print("\nUnbeaten: " + (", ".join(never_lost) if never_lost else "none"))

    desc = numeric_summary(filtered)
    if not desc.empty:
        print("\n=== Numeric summary ===")
        print(desc.to_string())

    if args.no_plots:
        return 0

    outdir = Path(args.outdir)
    plot_top_bar(filtered, outdir, metric=cfg.metric, top_n=cfg.top_n, show=args.show)
    # Classic trade-off: how strong vs how slow
    plot_scatter(filtered, outdir, x="avg_ms_per_move", y=cfg.metric, show=args.show)
    plot_outcomes(rates, outdir, show=args.show)

    if not args.show:
        print(f"\nSaved figures to: {outdir.resolve()}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())

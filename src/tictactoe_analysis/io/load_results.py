from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pandas as pd


NUMERIC_COLS = [
    "games", "wins", "draws", "losses",
    "points", "ppg",
    "strength_wilson_lcb",
    "wins_as_x", "wins_as_o",
    "moves", "time_ms", "nodes",
    "avg_ms_per_move", "avg_nodes_per_move",
]


@dataclass(frozen=True)
class LoadSpec:
    csv_path: Path
    required_cols: tuple[str, ...] = ("name", "games", "wins", "draws", "losses")


def load_results(spec: LoadSpec) -> pd.DataFrame:
    if not spec.csv_path.exists():
        raise FileNotFoundError(f"CSV not found: {spec.csv_path}")

    df = pd.read_csv(spec.csv_path)
    df.columns = [c.strip() for c in df.columns]

    missing = [c for c in spec.required_cols if c not in df.columns]
    if missing:
        raise ValueError(f"CSV missing required columns {missing}. Columns: {list(df.columns)}")

    for c in NUMERIC_COLS:
        if c in df.columns:
            df[c] = pd.to_numeric(df[c], errors="coerce")

    df["name"] = df["name"].astype(str).str.strip()
    df = df[df["name"].str.len() > 0].reset_index(drop=True)

    return df


def load_latest_from_dir(results_dir: Path, pattern: str = "league_results_*.csv") -> Path:
    if not results_dir.exists():
        raise FileNotFoundError(f"Results directory not found: {results_dir}")

    files = sorted(results_dir.glob(pattern))
    if not files:
        raise FileNotFoundError(f"No files matching {pattern} in {results_dir}")

    # Timestamped filenames sort chronologically
    return files[-1]

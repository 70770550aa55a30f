from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

import pandas as pd


MetricKey = Literal[
    "strength_wilson_lcb",
    "ppg",
    "points",
    "wins",
    "avg_ms_per_move",
    "avg_nodes_per_move",
]

# Metrics where a smaller number ranks higher
LOWER_IS_BETTER = {"avg_ms_per_move", "avg_nodes_per_move"}


@dataclass(frozen=True)
class SummaryConfig:
    metric: MetricKey = "strength_wilson_lcb"
    top_n: int = 20
    min_games: int = 0


def _require_cols(df: pd.DataFrame, cols: list[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}. Present: {list(df.columns)}")


def filter_rows(df: pd.DataFrame, cfg: SummaryConfig) -> pd.DataFrame:
    if cfg.min_games <= 0:
        return df.copy()
    _require_cols(df, ["games"])
    return df[df["games"].fillna(0) >= cfg.min_games].copy()


def top_table(df: pd.DataFrame, cfg: SummaryConfig) -> pd.DataFrame:
    _require_cols(df, ["name", cfg.metric])

    out = filter_rows(df, cfg)
    out = out.sort_values(cfg.metric, ascending=cfg.metric in LOWER_IS_BETTER)

    cols = [
        "name",
        "games", "wins", "draws", "losses",
        "ppg",
        "strength_wilson_lcb",
        "avg_ms_per_move",
        "avg_nodes_per_move",
    ]
    keep = [c for c in cols if c in out.columns]

    out = out[keep].head(cfg.top_n).reset_index(drop=True)
    out.insert(0, "rk", range(1, len(out) + 1))
    return out


def outcome_rates(df: pd.DataFrame) -> pd.DataFrame:
    """Per-agent win/draw/loss fractions, plus how many of the wins came as X."""
    _require_cols(df, ["name", "games", "wins", "draws", "losses"])

    games = df["games"].where(df["games"] > 0)
    out = pd.DataFrame({
        "name": df["name"],
        "win_rate": df["wins"] / games,
        "draw_rate": df["draws"] / games,
        "loss_rate": df["losses"] / games,
    })
    if "wins_as_x" in df.columns:
        out["x_share_of_wins"] = df["wins_as_x"] / df["wins"].where(df["wins"] > 0)

    out = out.fillna(0.0)
    return out.sort_values(["loss_rate", "win_rate"], ascending=[True, False]).reset_index(drop=True)


def unbeaten(df: pd.DataFrame) -> list[str]:
    """Agents that played at least one game and never lost."""
    _require_cols(df, ["name", "games", "losses"])
    mask = (df["games"] > 0) & (df["losses"] == 0)
    return df.loc[mask, "name"].tolist()


def numeric_summary(df: pd.DataFrame) -> pd.DataFrame:
    num = df.select_dtypes(include="number")
    if num.empty:
        return pd.DataFrame()
    return num.describe(percentiles=[0.25, 0.5, 0.75]).T

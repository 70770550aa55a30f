from __future__ import annotations

from pathlib import Path

import pandas as pd
import matplotlib.pyplot as plt

from ..metrics.summarize import LOWER_IS_BETTER


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _finish(fig, outdir: Path, filename: str, *, show: bool) -> Path | None:
    if show:
        plt.show()
        return None
    _ensure_dir(outdir)
    out = outdir / filename
    fig.savefig(out, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return out


def plot_top_bar(df: pd.DataFrame, outdir: Path, metric: str, top_n: int, *, show: bool) -> Path | None:
    if "name" not in df.columns or metric not in df.columns:
        return None
    if not pd.api.types.is_numeric_dtype(df[metric]):
        return None

    # Same best-first order as top_table
    top = df[["name", metric]].dropna().sort_values(metric, ascending=metric in LOWER_IS_BETTER).head(top_n)
    fig = plt.figure(figsize=(10, 5))
    plt.bar(top["name"].astype(str), top[metric].astype(float))
    plt.title(f"Top {min(top_n, len(top))}: {metric}")
    plt.xlabel("agent")
    plt.ylabel(metric)
    plt.xticks(rotation=45, ha="right")

    return _finish(fig, outdir, f"top_{top_n}_{metric}.png", show=show)


def plot_scatter(df: pd.DataFrame, outdir: Path, x: str, y: str, *, show: bool) -> Path | None:
    if x not in df.columns or y not in df.columns:
        return None
    if not (pd.api.types.is_numeric_dtype(df[x]) and pd.api.types.is_numeric_dtype(df[y])):
        return None

    fig = plt.figure()
    plt.scatter(df[x], df[y], alpha=0.7)
    for _, row in df.iterrows():
        plt.annotate(str(row["name"]), (row[x], row[y]), fontsize=7)
    plt.title(f"{y} vs {x}")
    plt.xlabel(x)
    plt.ylabel(y)

    return _finish(fig, outdir, f"scatter_{y}_vs_{x}.png", show=show)


def plot_outcomes(rates: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    """Stacked horizontal bars of win/draw/loss rate per agent (expects outcome_rates() output)."""
    cols = ["win_rate", "draw_rate", "loss_rate"]
    if rates.empty or any(c not in rates.columns for c in cols):
        return None

    fig, ax = plt.subplots(figsize=(8, max(2.0, 0.5 * len(rates) + 1)))
    left = pd.Series(0.0, index=rates.index)
    for col, color in zip(cols, ["tab:green", "tab:gray", "tab:red"]):
        ax.barh(rates["name"].astype(str), rates[col], left=left, color=color, label=col.replace("_rate", ""))
        left = left + rates[col]
    ax.set_xlim(0, 1)
    ax.set_xlabel("share of games")
    ax.set_title("Outcomes per agent")
    ax.legend(loc="lower right")

    return _finish(fig, outdir, "outcomes.png", show=show)

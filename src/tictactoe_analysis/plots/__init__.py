from .chart import (
    plot_outcomes,
    plot_scatter,
    plot_top_bar,
)

__all__ = [
    "plot_outcomes",
    "plot_scatter",
    "plot_top_bar",
]

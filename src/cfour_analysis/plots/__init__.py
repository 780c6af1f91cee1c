from .chart import (
    plot_first_player_rate,
    plot_results_stacked,
)

__all__ = [
    "plot_first_player_rate",
    "plot_results_stacked",
]

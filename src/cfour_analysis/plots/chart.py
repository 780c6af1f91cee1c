from __future__ import annotations

from pathlib import Path

import pandas as pd
import matplotlib.pyplot as plt


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _finish(fig, outdir: Path, name: str, *, show: bool) -> None:
    if show:
        plt.show()
    else:
        _ensure_dir(outdir)
        fig.savefig(outdir / name, dpi=200, bbox_inches="tight")
        plt.close(fig)


def plot_results_stacked(table: pd.DataFrame, outdir: Path, *, show: bool) -> None:
    """Stacked bar per matchup: A wins, B wins, draws."""
    if table.empty:
        return

    labels = (table["board"] + " " + table["matchup"]).astype(str)
    fig = plt.figure(figsize=(10, 5))
    plt.bar(labels, table["wins_a"], label="A wins")
    plt.bar(labels, table["wins_b"], bottom=table["wins_a"], label="B wins")
    plt.bar(labels, table["draws"], bottom=table["wins_a"] + table["wins_b"], label="draws")
    plt.title("Results per matchup")
    plt.xlabel("matchup")
    plt.ylabel("games")
    plt.xticks(rotation=45, ha="right")
    plt.legend()

    _finish(fig, outdir, "results_per_matchup.png", show=show)


def plot_first_player_rate(boards: pd.DataFrame, outdir: Path, *, show: bool) -> None:
    if boards.empty:
        return

    fig = plt.figure()
    plt.bar(boards["board"].astype(str), boards["first_player_rate"].astype(float))
    plt.title("First-player win rate by board size")
    plt.xlabel("board (rows x cols)")
    plt.ylabel("A win rate")
    plt.ylim(0, 1)

    _finish(fig, outdir, "first_player_rate.png", show=show)

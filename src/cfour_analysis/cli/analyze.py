from __future__ import annotations

import argparse
from pathlib import Path

from cfour.config import SCORE_FILE

from ..io.load_scores import LoadSpec, load_scores
from ..metrics.summarize import SummaryConfig, by_board, matchup_table
from ..plots.chart import plot_first_player_rate, plot_results_stacked


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Summarize a cfour scoreboard file.")
    ap.add_argument("--scores", type=str, default=str(SCORE_FILE), help="Scoreboard JSON written by the game or self-play")
    ap.add_argument("--outdir", type=str, default="figures", help="Directory for saving plots")
    ap.add_argument("--show", action="store_true", help="Show plots instead of saving")
    ap.add_argument("--no-plots", action="store_true", help="Print tables only")

    ap.add_argument("--top", type=int, default=20, help="Top N matchups in the table and chart")
    ap.add_argument("--sort", type=str, default="games", choices=["games", "win_rate_a", "win_rate_b", "draw_rate"])
    ap.add_argument("--min-games", type=int, default=0, help="Hide matchups with fewer games")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    path = Path(args.scores)
    df = load_scores(LoadSpec(path=path))

    print(f"\nLoaded: {path}")
    print(f"Matchups: {len(df):,}")

    cfg = SummaryConfig(sort_by=args.sort, top_n=args.top, min_games=args.min_games)
    table = matchup_table(df, cfg)
    boards = by_board(df)

    print("\n=== Matchups ===")
    print(table.to_string(index=False) if not table.empty else "(none)")

    print("\n=== By board size ===")
    print(boards.to_string(index=False) if not boards.empty else "(none)")

    if not args.no_plots:
        outdir = Path(args.outdir)
        plot_results_stacked(table, outdir, show=args.show)
        plot_first_player_rate(boards, outdir, show=args.show)
        if not args.show:
            print(f"\nSaved figures to: {outdir}")

    return 0

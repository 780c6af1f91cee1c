from __future__ import annotations

import argparse
import csv
import logging
import random
import time
from pathlib import Path
from typing import Dict, Optional

import pandas as pd

from cfour.ai.pick import DIFFICULTIES
from cfour.config import COLS, ROWS, SCORE_FILE
from cfour.game.controller import GameSession
from cfour.log import setup_logging
from cfour.scoreboard import Scoreboard, ScoreEntry
from cfour.settings import GameSettings
from cfour.types import Difficulty, Outcome, Player

from cfour_analysis.io.load_scores import scores_frame
from cfour_analysis.metrics.summarize import with_rates

log = logging.getLogger(__name__)


def play_game(session: GameSession, difficulties: Dict[Player, Difficulty]) -> Outcome:
    """Play one AI-vs-AI game to the end on a freshly reset session board."""
    session.reset()
    snap = session.snapshot()
    while not snap.terminal:
        side = snap.current
        col = session.ai_choose_column(difficulties[side])
        snap = session.apply_drop(col, side)
    return "draw" if snap.status == "draw" else snap.winner  # type: ignore[return-value]


def run_selfplay(
    games: int,
    difficulty_a: Difficulty,
    difficulty_b: Difficulty,
    *,
    rows: int = ROWS,
    cols: int = COLS,
    seed: Optional[int] = None,
    scoreboard: Optional[Scoreboard] = None,
) -> ScoreEntry:
    settings = GameSettings.from_dict({
        "mode": "pvp",
        "rows": rows,
        "cols": cols,
        "player_a_name": f"{difficulty_a.capitalize()} AI",
        "player_b_name": f"{difficulty_b.capitalize()} AI",
    })
    session = GameSession(settings, scoreboard, rng=random.Random(seed))
    sides: Dict[Player, Difficulty] = {"A": difficulty_a, "B": difficulty_b}

    for g in range(games):
        outcome = play_game(session, sides)
        log.info("Game %d/%d: %s", g + 1, games, outcome)

    return session.score()


def write_csv(scoreboard: Scoreboard, out_path: Path) -> None:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", newline="") as f:
        w = csv.writer(f)
        w.writerow(["rows", "cols", "player_a_name", "player_b_name", "wins_a", "wins_b", "draws", "games"])
        for e in scoreboard.entries():
            w.writerow([e.rows, e.cols, e.player_a_name, e.player_b_name, e.wins_a, e.wins_b, e.draws, e.games])


def summary_table(scoreboard: Scoreboard) -> pd.DataFrame:
    """Every matchup on the scoreboard with its counts and rates, busiest first."""
    df = with_rates(scores_frame(scoreboard.to_dict()))
    df = df.sort_values(["games", "key"], ascending=[False, True])
    keep = ["board", "matchup", "wins_a", "wins_b", "draws", "games", "win_rate_a", "draw_rate"]
    return df[keep].round(3).reset_index(drop=True)


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="python -m cfour.scripts.selfplay",
        description="Play the built-in AIs against each other and record the results.",
    )
    ap.add_argument("--games", type=int, default=20, help="Number of games to play")
    ap.add_argument("--a", dest="difficulty_a", choices=DIFFICULTIES, default="medium", help="Difficulty for player A (moves first)")
    ap.add_argument("--b", dest="difficulty_b", choices=DIFFICULTIES, default="easy", help="Difficulty for player B")
    ap.add_argument("--rows", type=int, default=ROWS)
    ap.add_argument("--cols", type=int, default=COLS)
    ap.add_argument("--seed", type=int, default=None, help="Seed for the Easy AI's random choices")
    ap.add_argument("--scores", type=str, default=str(SCORE_FILE), help="Scoreboard JSON to update")
    ap.add_argument("--csv", type=str, default=None, help="Also export the whole scoreboard as CSV")
    ap.add_argument("--log-level", type=str, default=None, help="DEBUG, INFO, WARNING ...")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    setup_logging(args.log_level)

    scores_path = Path(args.scores)
    scoreboard = Scoreboard.load(scores_path)

    start = time.perf_counter()
    entry = run_selfplay(
        args.games,
        args.difficulty_a,
        args.difficulty_b,
        rows=args.rows,
        cols=args.cols,
        seed=args.seed,
        scoreboard=scoreboard,
    )
    elapsed = time.perf_counter() - start

    scoreboard.save(scores_path)

    print("\n=== Scoreboard ===")
    print(summary_table(scoreboard).to_string(index=False) if len(scoreboard) else "(none)")
    print(f"\n{args.games} games in {elapsed:.2f}s; current matchup {entry.wins_a}-{entry.wins_b}-{entry.draws}")
    print(f"Wrote scores: {scores_path}")

    if args.csv:
        write_csv(scoreboard, Path(args.csv))
        print(f"Wrote CSV: {args.csv}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())

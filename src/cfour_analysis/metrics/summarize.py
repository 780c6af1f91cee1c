from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

import pandas as pd


SortKey = Literal["games", "win_rate_a", "win_rate_b", "draw_rate"]


@dataclass(frozen=True)
class SummaryConfig:
    sort_by: SortKey = "games"
    top_n: int = 20
    min_games: int = 0


def with_rates(df: pd.DataFrame) -> pd.DataFrame:
    out = df.copy()
    out["games"] = out["wins_a"] + out["wins_b"] + out["draws"]
    denom = out["games"].where(out["games"] > 0)
    out["win_rate_a"] = (out["wins_a"] / denom).fillna(0.0)
    out["win_rate_b"] = (out["wins_b"] / denom).fillna(0.0)
    out["draw_rate"] = (out["draws"] / denom).fillna(0.0)
    out["board"] = out["rows"].astype(str) + "x" + out["cols"].astype(str)
    out["matchup"] = out["player_a_name"] + " vs " + out["player_b_name"]
    return out


def matchup_table(df: pd.DataFrame, cfg: SummaryConfig) -> pd.DataFrame:
    out = with_rates(df)
    if cfg.min_games > 0:
        out = out[out["games"] >= cfg.min_games]

    out = out.sort_values([cfg.sort_by, "key"], ascending=[False, True])
    keep = ["board", "matchup", "wins_a", "wins_b", "draws", "games", "win_rate_a", "win_rate_b", "draw_rate"]
    out = out[keep].head(cfg.top_n).reset_index(drop=True)
    out.insert(0, "rk", range(1, len(out) + 1))
    return out


def by_board(df: pd.DataFrame) -> pd.DataFrame:
    """Totals per board size, first-player advantage included."""
    out = with_rates(df)
    g = out.groupby("board", sort=True)[["wins_a", "wins_b", "draws", "games"]].sum().reset_index()
    g["first_player_rate"] = (g["wins_a"] / g["games"].where(g["games"] > 0)).fillna(0.0)
    return g

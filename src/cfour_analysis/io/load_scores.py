from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

import pandas as pd


SCORE_COLS = [
    "rows", "cols",
    "player_a_name", "player_b_name",
    "wins_a", "wins_b", "draws",
]

REQUIRED_COLS = ["rows", "cols", "player_a_name", "player_b_name"]
COUNT_COLS = ["rows", "cols", "wins_a", "wins_b", "draws"]


@dataclass(frozen=True)
class LoadSpec:
    path: Path


def _coerce_counts(df: pd.DataFrame) -> pd.DataFrame:
    out = df.copy()
    for c in COUNT_COLS:
        out[c] = pd.to_numeric(out[c], errors="coerce").fillna(0).astype(int)
    return out


def scores_frame(record: dict) -> pd.DataFrame:
    """One row per matchup from a scoreboard record ({"matchups": {key: entry}})."""
    matchups = record.get("matchups") if isinstance(record, dict) else None
    if not isinstance(matchups, dict):
        raise ValueError("Scoreboard record has no 'matchups' object.")

    rows = [dict(entry, key=key) for key, entry in matchups.items() if isinstance(entry, dict)]
    df = pd.DataFrame(rows, columns=["key", *SCORE_COLS])

    bad = df[REQUIRED_COLS].isna().any(axis=1)
    if bad.any():
        raise ValueError(f"Scoreboard entries missing fields: {list(df.loc[bad, 'key'])}")

    df = _coerce_counts(df)
    df["player_a_name"] = df["player_a_name"].astype(str)
    df["player_b_name"] = df["player_b_name"].astype(str)
    return df


def load_scores(spec: LoadSpec) -> pd.DataFrame:
    if not spec.path.exists():
        raise FileNotFoundError(f"Scoreboard not found: {spec.path}")
    return scores_frame(json.loads(spec.path.read_text(encoding="utf-8")))

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, List

from cfour.types import Outcome

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchupKey:
    rows: int
    cols: int
    player_a_name: str
    player_b_name: str

    def __str__(self) -> str:
        return f"{self.rows}x{self.cols}|{self.player_a_name}|{self.player_b_name}"


@dataclass
class ScoreEntry:
    rows: int
    cols: int
    player_a_name: str
    player_b_name: str
    wins_a: int = 0
    wins_b: int = 0
    draws: int = 0

    @classmethod
    def empty(cls, key: MatchupKey) -> "ScoreEntry":
        return cls(key.rows, key.cols, key.player_a_name, key.player_b_name)

    @property
    def key(self) -> MatchupKey:
        return MatchupKey(self.rows, self.cols, self.player_a_name, self.player_b_name)

    @property
    def games(self) -> int:
        return self.wins_a + self.wins_b + self.draws

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "ScoreEntry":
        names = {f.name for f in fields(cls)}
        missing = names - d.keys() - {"wins_a", "wins_b", "draws"}
        if missing:
            raise ValueError(f"Score entry missing {sorted(missing)}")
        e = cls(**{k: d[k] for k in names if k in d})
        for k in ("rows", "cols", "wins_a", "wins_b", "draws"):
            v = getattr(e, k)
            if isinstance(v, bool) or not isinstance(v, int) or v < 0:
                raise ValueError(f"Score entry field {k} must be a non-negative integer, got {v!r}")
        if not isinstance(e.player_a_name, str) or not isinstance(e.player_b_name, str):
            raise ValueError("Score entry player names must be strings")
        return e


class Scoreboard:
    """Win/draw counters per matchup (board size + both player names)."""

    def __init__(self) -> None:
        self._entries: Dict[MatchupKey, ScoreEntry] = {}

    def entry(self, key: MatchupKey) -> ScoreEntry:
        e = self._entries.get(key)
        if e is None:
            e = self._entries[key] = ScoreEntry.empty(key)
        return e

    def record_result(self, key: MatchupKey, outcome: Outcome) -> ScoreEntry:
        e = self.entry(key)
        if outcome == "A":
            e.wins_a += 1
        elif outcome == "B":
            e.wins_b += 1
        elif outcome == "draw":
            e.draws += 1
        else:
            raise ValueError(f"Unknown outcome {outcome!r}")
        log.info("%s: recorded %s (A %d / B %d / draws %d)", key, outcome, e.wins_a, e.wins_b, e.draws)
        return e

    def reset_current(self, key: MatchupKey) -> ScoreEntry:
        e = self.entry(key)
        e.wins_a = e.wins_b = e.draws = 0
        return e

    def entries(self) -> List[ScoreEntry]:
        return list(self._entries.values())

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    # -----------------------------
    # Persisted record
    # -----------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {"matchups": {str(k): e.to_dict() for k, e in self._entries.items()}}

    @classmethod
    def from_dict(cls, obj: Any) -> "Scoreboard":
        """Rebuild from a stored record. Anything unreadable is skipped with a warning."""
        sb = cls()
        if not isinstance(obj, dict) or not isinstance(obj.get("matchups"), dict):
            log.warning("Ignoring malformed scoreboard record")
            return sb

        for name, raw in obj["matchups"].items():
            try:
                if not isinstance(raw, dict):
                    raise ValueError("entry is not an object")
                e = ScoreEntry.from_dict(raw)
            except (TypeError, ValueError) as exc:
                log.warning("Skipping scoreboard entry %r: %s", name, exc)
                continue
            sb._entries[e.key] = e
        return sb

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)

    @classmethod
    def from_json(cls, raw: str) -> "Scoreboard":
        try:
            obj = json.loads(raw)
        except json.JSONDecodeError as exc:
            log.warning("Scoreboard JSON unreadable: %s", exc)
            return cls()
        return cls.from_dict(obj)

    @classmethod
    def load(cls, path: Path) -> "Scoreboard":
        if not path.exists():
            return cls()
        return cls.from_json(path.read_text(encoding="utf-8"))

    def save(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.to_json(), encoding="utf-8")

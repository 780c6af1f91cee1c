from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, Optional

from cfour.config import COLS, MAX_DIM, MIN_DIM, PLAYER_A_NAME, PLAYER_B_NAME, ROWS
from cfour.core.rules import opponent
from cfour.scoreboard import MatchupKey
from cfour.types import Difficulty, Mode, Player

log = logging.getLogger(__name__)

_CHOICES: Dict[str, tuple[str, ...]] = {
    "mode": ("pvp", "pva"),
    "difficulty": ("easy", "medium"),
    "human_side": ("A", "B"),
}


def clamp_dim(value: Any, default: int) -> int:
    """Coerce a stored/typed dimension into [MIN_DIM, MAX_DIM]; unparseable falls back to `default`."""
    if isinstance(value, bool):
        return default
    try:
        n = int(value)
    except (TypeError, ValueError):
        return default
    return max(MIN_DIM, min(MAX_DIM, n))


@dataclass(frozen=True)
class GameSettings:
    mode: Mode = "pvp"
    difficulty: Difficulty = "medium"
    human_side: Player = "A"        # only meaningful in pva
    rows: int = ROWS
    cols: int = COLS
    player_a_name: str = PLAYER_A_NAME
    player_b_name: str = PLAYER_B_NAME

    @property
    def ai_side(self) -> Optional[Player]:
        if self.mode != "pva":
            return None
        return opponent(self.human_side)

    def matchup_key(self) -> MatchupKey:
        return MatchupKey(self.rows, self.cols, self.player_a_name, self.player_b_name)

    def player_name(self, player: Player) -> str:
        return self.player_a_name if player == "A" else self.player_b_name

    def with_changes(self, **changes: Any) -> "GameSettings":
        return GameSettings.from_dict({**self.to_dict(), **changes})

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, obj: Any) -> "GameSettings":
        """
        Merge a stored record over the defaults.

        Never raises: out-of-range sizes are clamped, blank names and unknown
        enum values fall back to the defaults.
        """
        base = cls()
        if not isinstance(obj, dict):
            log.warning("Ignoring malformed settings record")
            return base

        out: Dict[str, Any] = {}
        for key, allowed in _CHOICES.items():
            v = obj.get(key, getattr(base, key))
            if v not in allowed:
                log.warning("Settings %s=%r not one of %s; using %r", key, v, allowed, getattr(base, key))
                v = getattr(base, key)
            out[key] = v

        out["rows"] = clamp_dim(obj.get("rows", base.rows), base.rows)
        out["cols"] = clamp_dim(obj.get("cols", base.cols), base.cols)

        for key in ("player_a_name", "player_b_name"):
            v = obj.get(key)
            out[key] = v.strip() if isinstance(v, str) and v.strip() else getattr(base, key)

        return replace(base, **out)

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, raw: str) -> "GameSettings":
        try:
            obj = json.loads(raw)
        except json.JSONDecodeError as exc:
            log.warning("Settings JSON unreadable: %s", exc)
            return cls()
        return cls.from_dict(obj)

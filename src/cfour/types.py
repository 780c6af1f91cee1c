# src/cfour/types.py

from __future__ import annotations
from dataclasses import dataclass
from typing import Literal, Optional, NewType, Tuple

Player = Literal["A", "B"]          # A moves first (red), B second (yellow)
Cell = Optional[Player]
Column = NewType("Column", int)     # column index 0..cols-1
Coord = Tuple[int, int]             # (row, col), row 0 is the top

Outcome = Literal["A", "B", "draw"]
StatusKind = Literal["in_progress", "won", "draw"]
Difficulty = Literal["easy", "medium"]
Mode = Literal["pvp", "pva"]


@dataclass(frozen=True, slots=True)
class Move:
    row: int
    col: int
    player: Player

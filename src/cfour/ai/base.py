from __future__ import annotations
from typing import Protocol

from cfour.game.state import GameState
from cfour.types import Column


class Agent(Protocol):
    name: str
    last_info: dict

    def choose_move(self, state: GameState) -> Column:
        ...

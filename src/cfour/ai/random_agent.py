from __future__ import annotations
import random
from dataclasses import dataclass, field

from cfour.errors import InvalidTurn
from cfour.game.state import GameState
from cfour.types import Column


@dataclass(slots=True)
class RandomAgent:
    """Easy: uniform choice among the columns that still have room."""
    name: str = "Random AI"
    rng: random.Random = field(default_factory=random.Random)
    last_info: dict = field(default_factory=dict)

    def choose_move(self, state: GameState) -> Column:
        moves = state.valid_moves()
        if not moves:
            raise InvalidTurn("No valid moves.")
        choice = self.rng.choice(moves)
        self.last_info = {"rule": "random", "depth": 0, "nodes": 0, "move_col": int(choice) + 1}
        return choice

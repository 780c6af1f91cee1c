from __future__ import annotations

import random
from typing import Optional

from cfour.ai.base import Agent
from cfour.game.state import GameState
from cfour.types import Column, Difficulty

DIFFICULTIES: tuple[Difficulty, ...] = ("easy", "medium")


def agent_for(difficulty: Difficulty, rng: Optional[random.Random] = None) -> Agent:
    """Agent that plays at the given difficulty."""
    from cfour.ai.random_agent import RandomAgent
    from cfour.ai.tactical_agent import TacticalAgent

    if difficulty == "easy":
        return RandomAgent(name="Easy AI", rng=rng or random.Random())
    if difficulty == "medium":
        return TacticalAgent(name="Medium AI")
    raise ValueError(f"Unknown difficulty {difficulty!r}. Choose one of {', '.join(DIFFICULTIES)}.")


def choose_column(state: GameState, difficulty: Difficulty, rng: Optional[random.Random] = None) -> Column:
    return agent_for(difficulty, rng).choose_move(state)

from __future__ import annotations

import logging
import random
import threading
from contextlib import contextmanager
from dataclasses import replace
from typing import Any, Dict, Iterator, Optional

from cfour.ai.base import Agent
from cfour.ai.pick import agent_for
from cfour.errors import InvalidTurn
from cfour.game.state import GameState, Snapshot
from cfour.scoreboard import Scoreboard, ScoreEntry
from cfour.settings import GameSettings
from cfour.types import Column, Difficulty, Outcome, Player

log = logging.getLogger(__name__)


class GameSession:
    """
    What a front end talks to: one GameState, the settings it was built from,
    and the scoreboard its results go into.

    Every call runs under a single lock, so drops, undo/redo, resets and AI
    probing never interleave. Hosts that animate a drop set `busy` until the
    animation settles; mutations are refused while it is set.
    """

    def __init__(
        self,
        settings: Optional[GameSettings] = None,
        scoreboard: Optional[Scoreboard] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.settings = settings or GameSettings()
        self.scoreboard = scoreboard if scoreboard is not None else Scoreboard()
        self.rng = rng or random.Random()
        self.state = GameState.new(self.settings.rows, self.settings.cols)
        self._lock = threading.RLock()
        self._busy = False
        self._agents: Dict[Difficulty, Agent] = {}
        self.last_ai_info: Dict[str, Any] = {}

    # -----------------------------
    # Busy flag
    # -----------------------------
    @property
    def busy(self) -> bool:
        return self._busy

    def set_busy(self, busy: bool) -> None:
        with self._lock:
            self._busy = busy

    @contextmanager
    def hold(self) -> Iterator[None]:
        """Mark the session busy for the duration of a host-side animation. Nests."""
        with self._lock:
            was_busy = self._busy
            self._busy = True
        try:
            yield
        finally:
            self.set_busy(was_busy)

    @contextmanager
    def _mutation(self) -> Iterator[None]:
        with self._lock:
            if self._busy:
                raise InvalidTurn("A move is still settling.")
            yield

    # -----------------------------
    # Turn helpers
    # -----------------------------
    def is_ai_turn(self) -> bool:
        side = self.settings.ai_side
        return side is not None and not self.state.status.terminal and self.state.current == side

    def _record(self, outcome: Optional[Outcome]) -> None:
        if outcome is not None:
            self.scoreboard.record_result(self.settings.matchup_key(), outcome)

    # -----------------------------
    # Mutations
    # -----------------------------
    def apply_drop(self, col: int, player: Optional[Player] = None) -> Snapshot:
        """
        Drop a disc for `player` (default: whoever a human would be playing).
        In pva mode a call without `player` is refused on the AI's turn. Passing
        the AI's side explicitly lets the host make the computer's move itself,
        e.g. with a column from ai_choose_column().
        """
        with self._mutation():
            if player is None and self.is_ai_turn():
                raise InvalidTurn("Waiting for the computer to move.")
            outcome = self.state.apply_drop(Column(col), player)
            self._record(outcome)
            return self.state.snapshot()

    def undo(self) -> Snapshot:
        with self._mutation():
            self.state.undo()
            return self.state.snapshot()

    def redo(self) -> Snapshot:
        # redo replays the whole drop path, so a redone win is counted again
        with self._mutation():
            outcome = self.state.redo()
            self._record(outcome)
            return self.state.snapshot()

    def reset(self, rows: Optional[int] = None, cols: Optional[int] = None) -> Snapshot:
        with self._mutation():
            rows = self.settings.rows if rows is None else rows
            cols = self.settings.cols if cols is None else cols
            self.state.reset(rows, cols)
            self.settings = replace(self.settings, rows=rows, cols=cols)
            log.info("New %dx%d game (%s)", rows, cols, self.settings.mode)
            return self.state.snapshot()

    def apply_settings(self, settings: GameSettings) -> Snapshot:
        with self._mutation():
            self.state.reset(settings.rows, settings.cols)
            self.settings = settings
            log.info("Settings applied: %s", settings.to_dict())
            return self.state.snapshot()

    # -----------------------------
    # AI
    # -----------------------------
    def _agent(self, difficulty: Difficulty) -> Agent:
        agent = self._agents.get(difficulty)
        if agent is None:
            agent = self._agents[difficulty] = agent_for(difficulty, self.rng)
        return agent

    def _choose(self, difficulty: Difficulty) -> Column:
        agent = self._agent(difficulty)
        col = agent.choose_move(self.state)
        self.last_ai_info = dict(agent.last_info, agent=agent.name)
        log.debug("%s: %s", agent.name, self.last_ai_info)
        return col

    def ai_choose_column(self, difficulty: Optional[Difficulty] = None) -> int:
        """Column the AI would play for the side to move. Leaves the game untouched."""
        with self._lock:
            return int(self._choose(difficulty or self.settings.difficulty))

    def play_ai_turn(self) -> Snapshot:
        with self._mutation():
            if not self.is_ai_turn():
                raise InvalidTurn("It is not the computer's turn.")
            side = self.state.current
            col = self._choose(self.settings.difficulty)
            outcome = self.state.apply_drop(col, side)
            self._record(outcome)
            return self.state.snapshot()

    # -----------------------------
    # Queries
    # -----------------------------
    def snapshot(self) -> Snapshot:
        with self._lock:
            return self.state.snapshot()

    def score(self) -> ScoreEntry:
        with self._lock:
            return self.scoreboard.entry(self.settings.matchup_key())

    def reset_score(self) -> ScoreEntry:
        with self._lock:
            return self.scoreboard.reset_current(self.settings.matchup_key())

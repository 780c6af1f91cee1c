from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from cfour.core.board import Board
from cfour.core.rules import opponent, winning_line_through
from cfour.errors import InvalidTurn
from cfour.game.state import GameState
from cfour.types import Column, Player

log = logging.getLogger(__name__)


def wins_with(board: Board, col: Column, player: Player) -> bool:
    """Would dropping `player` into `col` complete a line? The board is left as it was."""
    row = board.available_row(col)
    if row is None:
        return False
    board.set(row, int(col), player)
    try:
        return winning_line_through(board, row, int(col)) is not None
    finally:
        board.clear(row, int(col))


def winning_column(board: Board, cols: Sequence[Column], player: Player) -> Optional[Column]:
    for c in cols:
        if wins_with(board, c, player):
            return c
    return None


def gives_opponent_immediate_win(board: Board, col: Column, player: Player) -> bool:
    """After `player` drops into `col`, does the opponent have a winning reply?"""
    row = board.available_row(col)
    if row is None:
        return False
    board.set(row, int(col), player)
    try:
        return winning_column(board, board.valid_moves(), opponent(player)) is not None
    finally:
        board.clear(row, int(col))


def center_preferred(cols: Sequence[Column], width: int) -> List[Column]:
    # stable sort: equal distance keeps ascending order, so ties go to the lower index
    center = (width - 1) / 2
    return sorted(cols, key=lambda c: abs(int(c) - center))


@dataclass
class TacticalAgent:
    """
    Medium difficulty, one AI move plus one opponent reply deep:
      1) Play an immediate winning move if available
      2) Block the opponent's immediate winning move
      3) Center-most column that does not hand the opponent a win next turn
      4) Center-most column overall when every move is unsafe

    Deterministic: the first qualifying column in ascending order wins each rule.
    """
    name: str = "Tactical"
    last_info: dict = field(default_factory=dict)

    def _done(self, t0: float, rule: str, choice: Column, nodes: int) -> Column:
        self.last_info = {
            "rule": rule,
            "depth": 2 if rule in ("safe-center", "center") else 1,
            "nodes": nodes,
            "move_col": int(choice) + 1,
            "time_ms": max(1, int((time.perf_counter() - t0) * 1000)),
        }
        log.debug("%s chose column %d by %s", self.name, int(choice) + 1, rule)
        return choice

    def choose_move(self, state: GameState) -> Column:
        t0 = time.perf_counter()
        board = state.board

        moves = state.valid_moves()
        if not moves:
            raise InvalidTurn("No valid moves.")

        me = state.current
        opp = opponent(me)

        # 1) win now
        m = winning_column(board, moves, me)
        if m is not None:
            return self._done(t0, "win", m, len(moves))

        # 2) block opponent win
        m = winning_column(board, moves, opp)
        if m is not None:
            return self._done(t0, "block", m, 2 * len(moves))

        # 3) center preference among safe columns
        safe = [c for c in moves if not gives_opponent_immediate_win(board, c, me)]
        nodes = 2 * len(moves) + len(moves) * len(moves)
        if safe:
            return self._done(t0, "safe-center", center_preferred(safe, board.cols)[0], nodes)
        return self._done(t0, "center", center_preferred(moves, board.cols)[0], nodes)

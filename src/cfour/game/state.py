from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from cfour.config import ROWS, COLS
from cfour.core.board import Board, check_dims
from cfour.core.rules import WinningLine, is_draw, opponent, winning_line_through
from cfour.errors import ColumnFull, InvalidTurn
from cfour.game.history import MoveHistory
from cfour.types import Cell, Column, Move, Outcome, Player, StatusKind

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Status:
    kind: StatusKind = "in_progress"
    winner: Optional[Player] = None
    line: Optional[WinningLine] = None

    @property
    def terminal(self) -> bool:
        return self.kind != "in_progress"

    @property
    def outcome(self) -> Optional[Outcome]:
        if self.kind == "won":
            return self.winner
        if self.kind == "draw":
            return "draw"
        return None


IN_PROGRESS = Status()
DRAW = Status("draw")


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Read-only view handed to the host: enough to render and to toggle undo/redo controls."""
    rows: int
    cols: int
    grid: Tuple[Tuple[Cell, ...], ...]
    current: Player
    status: StatusKind
    winner: Optional[Player]
    winning_line: Optional[WinningLine]
    can_undo: bool
    can_redo: bool
    move_count: int

    @property
    def terminal(self) -> bool:
        return self.status != "in_progress"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rows": self.rows,
            "cols": self.cols,
            "grid": [list(row) for row in self.grid],
            "current": self.current,
            "status": self.status,
            "winner": self.winner,
            "winning_line": [list(rc) for rc in self.winning_line] if self.winning_line else None,
            "can_undo": self.can_undo,
            "can_redo": self.can_redo,
            "move_count": self.move_count,
        }


@dataclass(slots=True)
class GameState:
    """
    Turn-based match over one Board.

    Transitions:
      in_progress --apply_drop/redo--> in_progress | won | draw
      any state with history --undo--> in_progress
      any state --reset--> in_progress on a fresh board

    Terminal states reject apply_drop; `current` stays on the player who made
    the final move.
    """
    board: Board = field(default_factory=Board)
    current: Player = "A"
    status: Status = IN_PROGRESS
    history: MoveHistory = field(default_factory=MoveHistory)

    @classmethod
    def new(cls, rows: int = ROWS, cols: int = COLS) -> "GameState":
        return cls(board=Board(rows, cols))

    @property
    def rows(self) -> int:
        return self.board.rows

    @property
    def cols(self) -> int:
        return self.board.cols

    def _place(self, col: Column, player: Player, replay: bool) -> Optional[Outcome]:
        row = self.board.available_row(col)
        if row is None:
            raise ColumnFull(int(col))

        self.board.set(row, int(col), player)
        line = winning_line_through(self.board, row, int(col))
        self.history.record(Move(row, int(col), player), replay=replay)
        self.current = player

        if line is not None:
            self.status = Status("won", player, line)
            log.info("Player %s wins with %s", player, list(line))
        elif is_draw(self.board, line):
            self.status = DRAW
            log.info("Draw after %d moves", len(self.history))
        else:
            self.current = opponent(player)

        log.debug("%s dropped in column %d (row %d)", player, int(col) + 1, row)
        return self.status.outcome

    def apply_drop(self, col: Column, player: Optional[Player] = None) -> Optional[Outcome]:
        """
        Drop the current player's disc into `col`.

        Returns the outcome when the move ends the game, else None.
        Raises InvalidTurn (game over or not `player`'s turn), ColumnFull or
        ValueError (column off the board); nothing changes when it raises.
        """
        if self.status.terminal:
            raise InvalidTurn("The game is over. Undo or start a new game.")
        if player is not None and player != self.current:
            raise InvalidTurn(f"It is player {self.current}'s turn, not {player}'s.")
        return self._place(col, self.current, replay=False)

    def undo(self) -> Move:
        move = self.history.undo_last()
        self.board.clear(move.row, move.col)
        self.current = move.player
        # undoing a winning or drawing move always reopens the game
        self.status = IN_PROGRESS
        log.debug("undo %s", move)
        return move

    def redo(self) -> Optional[Outcome]:
        move = self.history.redo_last()
        log.debug("redo %s", move)
        return self._place(Column(move.col), move.player, replay=True)

    def reset(self, rows: int, cols: int) -> None:
        check_dims(rows, cols)
        self.board = Board(rows, cols)
        self.history = MoveHistory()
        self.current = "A"
        self.status = IN_PROGRESS
        log.debug("reset to %dx%d", rows, cols)

    def valid_moves(self) -> list[Column]:
        if self.status.terminal:
            return []
        return self.board.valid_moves()

    def snapshot(self) -> Snapshot:
        return Snapshot(
            rows=self.board.rows,
            cols=self.board.cols,
            grid=self.board.grid(),
            current=self.current,
            status=self.status.kind,
            winner=self.status.winner,
            winning_line=self.status.line,
            can_undo=self.history.can_undo,
            can_redo=self.history.can_redo,
            move_count=len(self.history),
        )

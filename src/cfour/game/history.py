from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Tuple

from cfour.errors import EmptyHistory
from cfour.types import Move


@dataclass(slots=True)
class MoveHistory:
    """
    Undo stack (chronological) and redo stack (last undone move on top).

    Replaying `moves` in order onto an empty board reproduces the board.
    """
    _undo: List[Move] = field(default_factory=list)
    _redo: List[Move] = field(default_factory=list)

    def record(self, move: Move, replay: bool = False) -> None:
        self._undo.append(move)
        if not replay:
            self._redo.clear()

    def undo_last(self) -> Move:
        if not self._undo:
            raise EmptyHistory("Nothing to undo.")
        move = self._undo.pop()
        self._redo.append(move)
        return move

    def redo_last(self) -> Move:
        if not self._redo:
            raise EmptyHistory("Nothing to redo.")
        return self._redo.pop()

    @property
    def can_undo(self) -> bool:
        return bool(self._undo)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    @property
    def moves(self) -> Tuple[Move, ...]:
        return tuple(self._undo)

    @property
    def pending(self) -> Tuple[Move, ...]:
        return tuple(self._redo)

    def clear(self) -> None:
        self._undo.clear()
        self._redo.clear()

    def __len__(self) -> int:
        return len(self._undo)

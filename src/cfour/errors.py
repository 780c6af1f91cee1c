from __future__ import annotations


class GameError(ValueError):
    """Base error for rejected game operations. Nothing is mutated when raised."""

    def __init__(self, message: str = "cfour: invalid operation.") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ColumnFull(GameError):
    """The drop targeted a column with no empty cell left."""

    def __init__(self, col: int) -> None:
        super().__init__(f"Column {col + 1} is full.")
        self.col = col


class InvalidTurn(GameError):
    """A drop was attempted out of turn, while busy, or after the game ended."""
    pass


class EmptyHistory(GameError):
    """Undo or redo was requested with nothing to undo or redo."""
    pass


class InvalidDimensions(GameError):
    """Board rows/cols were not integers in the supported range."""
    pass

# src/cfour/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from cfour.config import ROWS, COLS, MIN_DIM, MAX_DIM
from cfour.errors import ColumnFull, InvalidDimensions
from cfour.types import Cell, Column, Player


def check_dims(rows: object, cols: object) -> Tuple[int, int]:
    for name, v in (("rows", rows), ("cols", cols)):
        # bool is an int subclass; True is not a board size
        if isinstance(v, bool) or not isinstance(v, int):
            raise InvalidDimensions(f"{name} must be an integer, got {v!r}.")
        if not (MIN_DIM <= v <= MAX_DIM):
            raise InvalidDimensions(f"{name} must be between {MIN_DIM} and {MAX_DIM}, got {v}.")
    return rows, cols  # type: ignore[return-value]


@dataclass(slots=True)
class Board:
    """
    Fixed-size grid stored as a flat list indexed by row * cols + col.
    Row 0 is the top; discs fall toward row rows - 1.

    Only gravity-respecting writes are accepted: set() at the column's
    available row, clear() of the column's topmost disc.
    """
    rows: int = ROWS
    cols: int = COLS
    _cells: List[Cell] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        check_dims(self.rows, self.cols)
        if not self._cells:
            self._cells = [None] * (self.rows * self.cols)

    def _index(self, row: int, col: int) -> int:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise ValueError(f"Cell ({row}, {col}) is off the board.")
        return row * self.cols + col

    def _check_col(self, col: int) -> int:
        if isinstance(col, bool) or not isinstance(col, int):
            raise ValueError(f"Column must be an integer, got {col!r}.")
        if col < 0 or col >= self.cols:
            raise ValueError(f"Column must be between 1 and {self.cols}.")
        return col

    def copy(self) -> "Board":
        return Board(self.rows, self.cols, self._cells[:])

    def get(self, row: int, col: int) -> Cell:
        return self._cells[self._index(row, col)]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def available_row(self, col: Column) -> Optional[int]:
        c = self._check_col(col)
        for r in range(self.rows - 1, -1, -1):
            if self._cells[r * self.cols + c] is None:
                return r
        return None

    def top_row(self, col: Column) -> Optional[int]:
        """Row of the topmost disc in a column, or None if the column is empty."""
        c = self._check_col(col)
        for r in range(self.rows):
            if self._cells[r * self.cols + c] is not None:
                return r
        return None

    def valid_moves(self) -> List[Column]:
        return [Column(c) for c in range(self.cols) if self._cells[c] is None]

    def is_full(self) -> bool:
        return all(self._cells[c] is not None for c in range(self.cols))

    def is_empty(self) -> bool:
        return all(p is None for p in self._cells)

    def set(self, row: int, col: int, player: Player) -> None:
        if self.available_row(Column(col)) != row:
            raise ValueError(f"Cell ({row}, {col}) is not the landing cell of column {col + 1}.")
        self._cells[self._index(row, col)] = player

    def clear(self, row: int, col: int) -> None:
        if self.top_row(Column(col)) != row:
            raise ValueError(f"Cell ({row}, {col}) is not the top disc of column {col + 1}.")
        self._cells[self._index(row, col)] = None

    def drop(self, col: Column, player: Player) -> int:
        r = self.available_row(col)
        if r is None:
            raise ColumnFull(int(col))
        self._cells[r * self.cols + int(col)] = player
        return r

    def cells(self) -> List[Cell]:
        return self._cells[:]

    def grid(self) -> Tuple[Tuple[Cell, ...], ...]:
        return tuple(
            tuple(self._cells[r * self.cols:(r + 1) * self.cols]) for r in range(self.rows)
        )

    def occupied(self) -> Iterator[Tuple[int, int, Player]]:
        for i, p in enumerate(self._cells):
            if p is not None:
                yield i // self.cols, i % self.cols, p

    def __str__(self) -> str:
        sym = {None: ".", "A": "X", "B": "O"}
        return "\n".join("".join(sym[p] for p in row) for row in self.grid())

from __future__ import annotations
from typing import Optional, Tuple

from cfour.config import CONNECT_N
from cfour.core.board import Board
from cfour.types import Coord, Player

WinningLine = Tuple[Coord, ...]

# horizontal, vertical, diagonal down-right, diagonal down-left
AXES: Tuple[Coord, ...] = ((0, 1), (1, 0), (1, 1), (1, -1))


def opponent(player: Player) -> Player:
    return "B" if player == "A" else "A"


def _run(board: Board, row: int, col: int, dr: int, dc: int, color: Player) -> list[Coord]:
    out: list[Coord] = []
    r, c = row + dr, col + dc
    while board.in_bounds(r, c) and board.get(r, c) == color:
        out.append((r, c))
        r, c = r + dr, c + dc
    return out


def winning_line_through(board: Board, row: int, col: int) -> Optional[WinningLine]:
    """
    Line of CONNECT_N or more same-colored discs through (row, col), or None.

    Only the axes through the given cell are walked, so this must be called
    for the disc that was just placed. The line is ordered end to end along
    its axis, starting from the end nearest the top (or the left for
    horizontal lines).
    """
    color = board.get(row, col)
    if color is None:
        raise ValueError(f"Cell ({row}, {col}) is empty.")

    for dr, dc in AXES:
        back = _run(board, row, col, -dr, -dc, color)
        fwd = _run(board, row, col, dr, dc, color)
        if len(back) + 1 + len(fwd) >= CONNECT_N:
            return tuple(reversed(back)) + ((row, col),) + tuple(fwd)

    return None


def find_any_line(board: Board) -> Optional[Tuple[Player, WinningLine]]:
    """Full-board scan. For checks and tooling; the game loop never needs it."""
    for r, c, p in board.occupied():
        line = winning_line_through(board, r, c)
        if line is not None:
            return p, line
    return None


def is_draw(board: Board, line: Optional[WinningLine]) -> bool:
    return line is None and board.is_full()

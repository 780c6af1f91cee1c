"""Board-building helpers shared by the test modules."""

from typing import Iterable

from cfour.core.board import Board
from cfour.game.state import GameState

# Column order that fills a 4x4 board with no four-in-a-row; the last drop draws.
DRAW_4X4 = [0, 1, 0, 1, 2, 3, 2, 3, 1, 0, 1, 0, 3, 2, 3, 2]

# A stacks column 3 while B answers in column 0; A's fourth disc wins.
VERTICAL_WIN_7X6 = [3, 0, 3, 0, 3, 0, 3]


def play(state: GameState, cols: Iterable[int]) -> GameState:
    for c in cols:
        state.apply_drop(c)
    return state


def fill(board: Board, col: int, players: str) -> None:
    """Drop discs bottom-up into one column, e.g. fill(b, 0, "BBA")."""
    for p in players:
        board.drop(col, p)


def replay(state: GameState) -> Board:
    b = Board(state.rows, state.cols)
    for m in state.history.moves:
        b.set(m.row, m.col, m.player)
    return b

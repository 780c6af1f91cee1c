"""Tests for the flat-grid Board."""

import pytest

from cfour.core.board import Board, check_dims
from cfour.errors import ColumnFull, InvalidDimensions

from helpers import fill


class TestDimensions:
    @pytest.mark.parametrize("rows,cols", [(4, 4), (6, 7), (12, 12), (5, 9)])
    def test_accepts_supported_sizes(self, rows, cols):
        b = Board(rows, cols)
        assert (b.rows, b.cols) == (rows, cols)
        assert len(b.cells()) == rows * cols
        assert b.is_empty()

    @pytest.mark.parametrize("rows,cols", [(3, 7), (6, 13), (0, 0), (True, 7), (6.0, 7), ("6", 7)])
    def test_rejects_bad_sizes(self, rows, cols):
        with pytest.raises(InvalidDimensions):
            check_dims(rows, cols)
        with pytest.raises(InvalidDimensions):
            Board(rows, cols)


class TestGravity:
    def test_available_row_starts_at_bottom(self, board):
        assert board.available_row(0) == 5
        board.drop(0, "A")
        assert board.available_row(0) == 4

    def test_available_row_none_when_full(self, board):
        fill(board, 2, "ABABAB")
        assert board.available_row(2) is None
        assert 2 not in board.valid_moves()

    def test_drop_into_full_column_raises(self, board):
        fill(board, 2, "ABABAB")
        with pytest.raises(ColumnFull):
            board.drop(2, "A")

    def test_column_out_of_range(self, board):
        with pytest.raises(ValueError):
            board.available_row(7)
        with pytest.raises(ValueError):
            board.available_row(-1)

    @pytest.mark.parametrize("col", [3.9, 3.0, True, False, "3", None])
    def test_column_must_be_int(self, board, col):
        with pytest.raises(ValueError):
            board.available_row(col)
        with pytest.raises(ValueError):
            board.drop(col, "A")
        assert board.is_empty()

    def test_set_only_at_landing_cell(self, board):
        with pytest.raises(ValueError):
            board.set(0, 0, "A")  # floating disc
        board.set(5, 0, "A")
        assert board.get(5, 0) == "A"

    def test_clear_only_topmost_disc(self, board):
        fill(board, 1, "AB")
        with pytest.raises(ValueError):
            board.clear(5, 1)
        board.clear(4, 1)
        assert board.get(4, 1) is None
        assert board.top_row(1) == 5

    def test_top_row_empty_column(self, board):
        assert board.top_row(4) is None


class TestQueries:
    def test_is_full(self):
        b = Board(4, 4)
        for c in range(4):
            fill(b, c, "ABAB" if c % 2 == 0 else "BABA")
        assert b.is_full()
        assert b.valid_moves() == []

    def test_grid_rows_top_to_bottom(self, board):
        board.drop(3, "B")
        g = board.grid()
        assert len(g) == 6 and len(g[0]) == 7
        assert g[5][3] == "B"
        assert all(p is None for p in g[0])

    def test_copy_is_independent(self, board):
        board.drop(0, "A")
        other = board.copy()
        other.drop(0, "B")
        assert board.get(4, 0) is None
        assert other.get(4, 0) == "B"

    def test_occupied_lists_discs(self, board):
        board.drop(0, "A")
        board.drop(6, "B")
        assert sorted(board.occupied()) == [(5, 0, "A"), (5, 6, "B")]

    def test_str(self):
        b = Board(4, 4)
        b.drop(0, "A")
        b.drop(1, "B")
        assert str(b).splitlines()[-1] == "XO.."

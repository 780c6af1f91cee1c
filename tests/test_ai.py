"""Tests for the Easy and Medium computer players."""

import random

import pytest

from cfour.ai.pick import agent_for, choose_column
from cfour.ai.random_agent import RandomAgent
from cfour.ai.tactical_agent import (
    TacticalAgent,
    center_preferred,
    gives_opponent_immediate_win,
    wins_with,
)
from cfour.errors import InvalidTurn
from cfour.game.state import GameState

from helpers import VERTICAL_WIN_7X6, play

# A holds row 4, columns 0-2, over a mixed bottom row. Column 3 is still
# empty, so B dropping there lets A win on top of it.
TRAP_FOR_B = [1, 0, 0, 2, 2, 6, 1]


class TestHelpers:
    def test_wins_with_restores_board(self, state):
        play(state, [3, 0, 3, 0, 3, 0])
        before = state.board.cells()
        assert wins_with(state.board, 3, "A")
        assert not wins_with(state.board, 4, "A")
        assert state.board.cells() == before

    def test_wins_with_full_column(self, state):
        play(state, [0] * 6)
        assert not wins_with(state.board, 0, "A")

    def test_gives_opponent_immediate_win(self, state):
        play(state, TRAP_FOR_B)
        before = state.board.cells()
        assert gives_opponent_immediate_win(state.board, 3, "B")
        assert not gives_opponent_immediate_win(state.board, 2, "B")
        assert state.board.cells() == before

    def test_center_preferred_odd_width(self):
        assert center_preferred([0, 1, 2, 3, 4, 5, 6], 7) == [3, 2, 4, 1, 5, 0, 6]

    def test_center_preferred_even_width_ties_low(self):
        assert center_preferred([0, 1, 2, 3, 4, 5], 6)[:2] == [2, 3]


class TestMedium:
    def test_opens_in_center(self, state):
        assert choose_column(state, "medium") == 3

    def test_even_board_prefers_lower_center(self):
        assert choose_column(GameState.new(6, 6), "medium") == 2

    def test_takes_the_win(self, state):
        # A to move with three stacked in column 0; B threatens column 6 too
        play(state, [0, 6, 0, 6, 0, 6])
        agent = TacticalAgent()
        assert agent.choose_move(state) == 0
        assert agent.last_info["rule"] == "win"

    def test_blocks_open_three(self, state):
        # A: row 5 columns 2-4 with both ends open; B to move
        play(state, [2, 2, 3, 3, 4])
        before = state.board.cells()
        col = choose_column(state, "medium")
        assert col in (1, 5)
        assert col == 1  # first blocking column in ascending order
        assert state.board.cells() == before

    def test_avoids_handing_over_a_win(self, state):
        play(state, TRAP_FOR_B)
        agent = TacticalAgent()
        col = agent.choose_move(state)
        assert col == 2
        assert agent.last_info["rule"] == "safe-center"

    def test_falls_back_to_center_when_nothing_is_safe(self, state, monkeypatch):
        monkeypatch.setattr(
            "cfour.ai.tactical_agent.gives_opponent_immediate_win", lambda board, col, player: True
        )
        play(state, [3] * 6)
        agent = TacticalAgent()
        assert agent.choose_move(state) == 2
        assert agent.last_info["rule"] == "center"

    def test_no_moves_raises(self, state):
        play(state, VERTICAL_WIN_7X6)
        with pytest.raises(InvalidTurn):
            TacticalAgent().choose_move(state)

    def test_game_state_untouched(self, state):
        play(state, [3, 3, 2, 4])
        before = state.snapshot()
        choose_column(state, "medium")
        assert state.snapshot() == before


class TestEasy:
    def test_only_valid_columns(self, state):
        play(state, [3] * 6)
        agent = RandomAgent(rng=random.Random(7))
        picks = {int(agent.choose_move(state)) for _ in range(200)}
        assert 3 not in picks
        assert picks <= {0, 1, 2, 4, 5, 6}
        assert len(picks) > 1

    def test_seeded_choice_is_repeatable(self, state):
        a = [choose_column(state, "easy", random.Random(42)) for _ in range(3)]
        assert len(set(a)) == 1

    def test_no_moves_raises(self, state):
        play(state, VERTICAL_WIN_7X6)
        with pytest.raises(InvalidTurn):
            RandomAgent().choose_move(state)


def test_unknown_difficulty():
    with pytest.raises(ValueError):
        agent_for("hard")


def test_agents_have_names():
    assert agent_for("easy").name == "Easy AI"
    assert agent_for("medium").name == "Medium AI"

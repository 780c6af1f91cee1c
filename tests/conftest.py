"""Shared fixtures for the cfour test suite."""

import pytest

from cfour.core.board import Board
from cfour.game.controller import GameSession
from cfour.game.state import GameState
from cfour.settings import GameSettings


@pytest.fixture
def board():
    """Standard 6x7 board."""
    return Board(6, 7)


@pytest.fixture
def state():
    """Fresh 6-row, 7-column game."""
    return GameState.new(6, 7)


@pytest.fixture
def session():
    """Two-player session on the default board."""
    return GameSession(GameSettings())

# src/cfour/config.py

from __future__ import annotations

import os
from pathlib import Path

ROWS = 6
COLS = 7
CONNECT_N = 4

# board dimensions accepted by reset / settings
MIN_DIM = 4
MAX_DIM = 12

PLAYER_A_NAME = "Player 1"
PLAYER_B_NAME = "Player 2"

# Logging (CFOUR_LOG_LEVEL=DEBUG to trace moves and AI decisions)
LOG_LEVEL = os.environ.get("CFOUR_LOG_LEVEL", "WARNING").upper()
LOG_COLOR = True

# Where the command-line tools keep the scoreboard record
SCORE_FILE = Path(os.environ.get("CFOUR_SCORE_FILE", "data/scores.json"))

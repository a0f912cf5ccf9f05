# src/othello/config.py

from __future__ import annotations

from othello.types import Difficulty

DEFAULT_BOARD_SIZE = 8
MIN_BOARD_SIZE = 4
BOARD_SIZES = (4, 6, 8, 10, 12)  # offered by the start menu; any even size >= 4 is accepted

DEFAULT_DIFFICULTY = Difficulty.EASY

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True
SHOW_LEGAL_MOVES = True

# “AI thinking” effect
AI_THINKING_SPINNER = True
AI_THINK_DELAY_SEC = 1  # pause before the AI replies

# Hard difficulty search depth (plies)
MINIMAX_DEPTH = 3

# Logging
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATEFMT = "%H:%M:%S"

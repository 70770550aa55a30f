# src/tictactoe/config.py

from __future__ import annotations

BOARD_SIZE = 3
WIN_ROW_LENGTH = 3

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True

# “AI thinking” effect
AI_THINKING_SPINNER = True
AI_THINK_DELAY_SEC = 0.5

# Pause after every move so the board can be read
RESPONSE_PAUSE_SEC = 0.8

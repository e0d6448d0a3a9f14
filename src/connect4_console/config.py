# src/connect4_console/config.py

from __future__ import annotations

ROWS = 6
COLS = 7
CONNECT_N = 4

# Input
PROMPT = "Select a square? "

# Logging (stderr only; stdout is reserved for the board)
LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATEFMT = "%H:%M:%S"

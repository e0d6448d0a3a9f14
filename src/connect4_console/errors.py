# src/connect4_console/errors.py

from __future__ import annotations


class GameError(ValueError):
    """Base class for errors the turn loop reports to the player and retries."""


class InvalidInput(GameError):
    pass


class InputStreamError(InvalidInput):
    """Reading a line failed (end of stream)."""


class ColumnFull(GameError):
    def __init__(self, column: int) -> None:
        super().__init__("Column is full.")
        self.column = column

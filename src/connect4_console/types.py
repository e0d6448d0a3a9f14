# src/connect4_console/types.py

from __future__ import annotations
from enum import Enum
from typing import NewType

Move = NewType("Move", int)   # column index 0..6


class Piece(Enum):
    RED = "R"
    BLACK = "B"
    EMPTY = " "

    @property
    def marker(self) -> str:
        return self.value


class Outcome(Enum):
    RED_WINS = "red"
    BLACK_WINS = "black"
    DRAW = "draw"
    IN_PROGRESS = "in_progress"

    def is_terminal(self) -> bool:
        return self is not Outcome.IN_PROGRESS

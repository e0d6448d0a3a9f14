from __future__ import annotations
from dataclasses import dataclass

from connect4_console.core.board import Board
from connect4_console.types import Outcome, Piece


@dataclass(slots=True)
class GameState:
    board: Board
    current: Piece = Piece.RED
    moves: int = 0
    outcome: Outcome = Outcome.IN_PROGRESS

from __future__ import annotations

from connect4_console.types import Outcome

_ANNOUNCEMENTS = {
    Outcome.RED_WINS: "Red won!",
    Outcome.BLACK_WINS: "Black won!",
    Outcome.DRAW: "draw!",
}


def announce(outcome: Outcome) -> str:
    if not outcome.is_terminal():
        raise ValueError("Game is still in progress.")
    return _ANNOUNCEMENTS[outcome]

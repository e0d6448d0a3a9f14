from __future__ import annotations
import logging
from typing import TYPE_CHECKING

from connect4_console.config import COLS, PROMPT
from connect4_console.errors import InvalidInput
from connect4_console.types import Move

if TYPE_CHECKING:
    from connect4_console.ui.console import Console

log = logging.getLogger(__name__)

_VALID = {str(i + 1): Move(i) for i in range(COLS)}


def parse_move(raw: str) -> Move:
    s = raw.strip()
    move = _VALID.get(s)
    if move is None:
        log.debug("Rejected move text %r", raw)
        raise InvalidInput("column must be one of 1-7")
    return move


def ask_for_move(console: "Console") -> Move:
    return parse_move(console.ask(PROMPT))

from __future__ import annotations

from typing import List, Optional

from connect4_console.core.board import create_empty_grid
from connect4_console.game.controller import run_game
from connect4_console.game.results import announce
from connect4_console.logs import configure_logging
from connect4_console.ui.console import Console


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    configure_logging()
    console = console if console is not None else Console()

    console.show_board(create_empty_grid())

    board = create_empty_grid()
    try:
        outcome = run_game(console, board)
    except KeyboardInterrupt:
        console.write("\nGame interrupted.")
        return 130

    console.write(f"\n\n{announce(outcome)}")
    console.show_board(board)
    return 0

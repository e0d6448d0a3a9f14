from __future__ import annotations
import logging
from typing import Optional

from connect4_console.core.board import Board, create_empty_grid
from connect4_console.core.rules import check_winner_with_line, detect_outcome
from connect4_console.errors import ColumnFull, InputStreamError, InvalidInput
from connect4_console.game.state import GameState
from connect4_console.types import Move, Outcome, Piece
from connect4_console.ui.console import Console
from connect4_console.ui.prompts import ask_for_move

log = logging.getLogger(__name__)


def other(player: Piece) -> Piece:
    return Piece.BLACK if player is Piece.RED else Piece.RED


def _apply_valid_move(state: GameState, console: Console) -> Move:
    """
    Ask until a move is both well-formed and fits on the board.
    Rejected attempts leave the board and the player to move untouched.
    """
    while True:
        try:
            move = ask_for_move(console)
            state.board.drop(move, state.current)
            return move

        except InvalidInput as e:
            if isinstance(e, InputStreamError):
                log.info("Input failure for %s: %s", state.current.name, e)
            console.write(f"Error: {e}")

        except ColumnFull as e:
            console.write(str(e))


def play_turn(state: GameState, console: Console) -> Outcome:
    if state.outcome.is_terminal():
        raise ValueError("Game is already over.")

    move = _apply_valid_move(state, console)
    state.moves += 1
    console.show_board(state.board)

    state.outcome = detect_outcome(state.board)
    log.debug("Move %d: %s -> column %d, %s", state.moves, state.current.name, int(move), state.outcome.name)

    if not state.outcome.is_terminal():
        state.current = other(state.current)
    return state.outcome


def run_game(console: Console, board: Optional[Board] = None) -> Outcome:
    state = GameState(board=board if board is not None else create_empty_grid())
    state.outcome = detect_outcome(state.board)

    while not state.outcome.is_terminal():
        play_turn(state, console)

    w = check_winner_with_line(state.board)
    if w is not None:
        log.info("%s wins with %s after %d moves", w[0].name, w[1], state.moves)
    else:
        log.info("Draw after %d moves", state.moves)
    return state.outcome

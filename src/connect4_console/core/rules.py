from __future__ import annotations
from typing import Optional, List, Tuple

from connect4_console.config import CONNECT_N
from connect4_console.core.board import Board
from connect4_console.types import Outcome, Piece

Coord = Tuple[int, int]  # (row, col)
Step = Tuple[int, int]  # (d_row, d_col)

# Scan order decides which run is reported when several exist.
_DIRECTIONS: List[Step] = [
    (0, 1),   # horizontal
    (1, 0),   # vertical
    (1, 1),   # diagonal down-right
    (-1, 1),  # diagonal up-right
]


def _run_from(board: Board, r: int, c: int, dr: int, dc: int) -> Optional[List[Coord]]:
    g = board.grid
    p = g[r][c]
    if p is Piece.EMPTY:
        return None
    line = [(r + i * dr, c + i * dc) for i in range(CONNECT_N)]
    if all(g[rr][cc] is p for rr, cc in line):
        return line
    return None


def check_winner_with_line(board: Board) -> Optional[Tuple[Piece, List[Coord]]]:
    span = CONNECT_N - 1

    for dr, dc in _DIRECTIONS:
        rows = range(span, board.rows) if dr < 0 else range(board.rows - span * dr)
        for r in rows:
            for c in range(board.cols - span * dc):
                line = _run_from(board, r, c, dr, dc)
                if line is not None:
                    return board.grid[r][c], line

    return None


def check_winner(board: Board) -> Optional[Piece]:
    res = check_winner_with_line(board)
    return res[0] if res else None


def is_draw(board: Board) -> bool:
    return board.is_full() and check_winner(board) is None


def detect_outcome(board: Board) -> Outcome:
    winner = check_winner(board)
    if winner is Piece.RED:
        return Outcome.RED_WINS
    if winner is Piece.BLACK:
        return Outcome.BLACK_WINS
    if board.is_full():
        return Outcome.DRAW
    return Outcome.IN_PROGRESS

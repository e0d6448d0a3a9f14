from __future__ import annotations
from typing import List

from connect4_console.core.board import Board

BORDER = "+-------------+"
SEPARATOR = "|-+-+-+-+-+-+-|"


def _row_line(cells) -> str:
    return "|" + "|".join(p.marker for p in cells) + "|"


def render(board: Board) -> str:
    """
    Text depiction of the board, e.g.

     1 2 3 4 5 6 7
    +-------------+
    | | | | | | | |
    |-+-+-+-+-+-+-|
    ...
    |R|B| | | | | |
    +-------------+
    """
    lines: List[str] = [" " + " ".join(str(i + 1) for i in range(board.cols)), BORDER]

    for r in range(board.rows):
        lines.append(_row_line(board.grid[r]))
        lines.append(SEPARATOR if r < board.rows - 1 else BORDER)

    return "\n".join(lines)

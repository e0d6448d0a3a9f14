# src/connect4_console/core/board.py

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Iterable, List

from connect4_console.config import ROWS, COLS
from connect4_console.errors import ColumnFull, InvalidInput
from connect4_console.types import Move, Piece

log = logging.getLogger(__name__)

_MARKERS = {"R": Piece.RED, "B": Piece.BLACK, " ": Piece.EMPTY, ".": Piece.EMPTY}


@dataclass(slots=True)
class Board:
    rows: int = ROWS
    cols: int = COLS
    grid: List[List[Piece]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.grid:
            self.grid = [[Piece.EMPTY for _ in range(self.cols)] for _ in range(self.rows)]

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> "Board":
        """
        Build a board from one string per row, top row first.
        'R' and 'B' are pieces; a space or '.' is an empty cell.
        """
        lines = list(rows)
        if len(lines) != ROWS:
            raise ValueError(f"Expected {ROWS} rows, got {len(lines)}.")

        grid: List[List[Piece]] = []
        for r, line in enumerate(lines):
            if len(line) != COLS:
                raise ValueError(f"Row {r} must have {COLS} cells, got {len(line)}.")
            try:
                grid.append([_MARKERS[ch] for ch in line.upper()])
            except KeyError as e:
                raise ValueError(f"Unknown marker {e.args[0]!r} in row {r}.") from None
        return cls(ROWS, COLS, grid)

    def cell(self, row: int, col: int) -> Piece:
        return self.grid[row][col]

    def column_height(self, col: int) -> int:
        return sum(1 for r in range(self.rows) if self.grid[r][col] is not Piece.EMPTY)

    def is_full(self) -> bool:
        return all(self.grid[0][c] is not Piece.EMPTY for c in range(self.cols))

    def drop(self, col: Move, player: Piece) -> int:
        c = int(col)
        if player is Piece.EMPTY:
            raise ValueError("Cannot drop an empty piece.")
        if c < 0 or c >= self.cols:
            raise InvalidInput("column must be one of 1-7")
        if self.grid[0][c] is not Piece.EMPTY:
            log.debug("Rejected drop into full column %d", c)
            raise ColumnFull(c)

        for r in range(self.rows - 1, -1, -1):
            if self.grid[r][c] is Piece.EMPTY:
                self.grid[r][c] = player
                log.debug("%s dropped at (%d, %d)", player.name, r, c)
                return r

        raise ColumnFull(c)


def create_empty_grid() -> Board:
    return Board()


def drop_piece(board: Board, column: Move, color: Piece) -> int:
    return board.drop(column, color)

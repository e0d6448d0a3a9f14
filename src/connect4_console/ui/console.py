from __future__ import annotations
import sys
from typing import Callable, Optional, TextIO

from connect4_console.core.board import Board
from connect4_console.errors import InputStreamError
from connect4_console.ui.render import render


class Console:
    """
    Line-oriented stdin/stdout collaborator for the turn loop.
    """

    def __init__(
        self,
        read: Callable[[str], str] = input,
        out: Optional[TextIO] = None,
    ) -> None:
        self._read = read
        self._out = out

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def ask(self, prompt: str) -> str:
        try:
            return self._read(prompt)
        except EOFError:
            # input() has already written the prompt; finish the line
            self.out.write("\n")
            raise InputStreamError("input stream closed") from None

    def write(self, text: str = "") -> None:
        self.out.write(text + "\n")
        self.out.flush()

    def show_board(self, board: Board) -> None:
        self.write("\n" + render(board) + "\n")

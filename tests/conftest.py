"""Shared fixtures: scripted consoles and fixed board positions."""

import io
from collections import deque

import pytest

from connect4_console.core.board import Board
from connect4_console.ui.console import Console


class ScriptedInput:
    """Feeds canned lines to Console; each None entry raises EOFError."""

    def __init__(self, lines):
        self.lines = deque(lines)
        self.prompts = []

    def __call__(self, prompt):
        self.prompts.append(prompt)
        if not self.lines:
            raise AssertionError("scripted input exhausted")
        line = self.lines.popleft()
        if line is None:
            raise EOFError
        return line


@pytest.fixture
def scripted():
    """Build a Console reading from a list of lines and writing to a StringIO."""

    def make(lines):
        reader = ScriptedInput(lines)
        out = io.StringIO()
        return Console(read=reader, out=out), reader, out

    return make


# Full board with no four-in-a-row anywhere.
DRAW_ROWS = [
    "RRBBRRB",
    "BBRRBBR",
    "RRBBRRB",
    "BBRRBBR",
    "RRBBRRB",
    "BBRRBBR",
]


@pytest.fixture
def draw_board():
    return Board.from_rows(DRAW_ROWS)


@pytest.fixture
def alternating_board():
    return Board.from_rows([
        ".......",
        ".......",
        "BRBRBRB",
        "BRBRBRB",
        "RBRBRBR",
        "RBRBRBR",
    ])

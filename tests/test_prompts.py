"""Tests for move parsing and prompting."""

import pytest

from connect4_console.errors import InputStreamError, InvalidInput
from connect4_console.ui.prompts import ask_for_move, parse_move


@pytest.mark.parametrize("raw,expected", [(str(i + 1), i) for i in range(7)])
def test_valid_columns(raw, expected):
    assert parse_move(raw) == expected


@pytest.mark.parametrize("raw", ["  3  ", "3\n", "\t3\r\n"])
def test_surrounding_whitespace_is_stripped(raw):
    assert parse_move(raw) == 2


@pytest.mark.parametrize("raw", ["0", "8", "", "   ", "a", "12", "3 4", "-1", "+3", "03", "3.0", "٣"])
def test_invalid_text(raw):
    with pytest.raises(InvalidInput, match="column must be one of 1-7"):
        parse_move(raw)


def test_ask_for_move_uses_prompt(scripted):
    console, reader, _ = scripted(["5\n"])
    assert ask_for_move(console) == 4
    assert reader.prompts == ["Select a square? "]


def test_ask_for_move_stream_failure(scripted):
    console, _, out = scripted([None])
    with pytest.raises(InputStreamError):
        ask_for_move(console)
    # stream failures are a kind of invalid input
    assert issubclass(InputStreamError, InvalidInput)
    assert out.getvalue() == "\n"

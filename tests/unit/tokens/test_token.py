# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Unit tests for Token derived attributes."""

from __future__ import annotations

import dataclasses
import tokenize
from pathlib import Path

import pytest

from lexcheck.tokens import WHITESPACE, Token

pytestmark = pytest.mark.unit


def _whitespace(text: str, line: int = 5, column: int = 10) -> Token:
    return Token(kind=WHITESPACE, text=text, raw_line=line, raw_column=column)


def test_whitespace_with_leading_breaks_moves_to_following_line() -> None:
    token = _whitespace("\n\n  ")

    assert token.effective_line == 7
    assert token.effective_column == 1
    assert (token.raw_line, token.raw_column) == (5, 10)


def test_whitespace_without_leading_break_keeps_raw_position() -> None:
    token = _whitespace("  ")

    assert token.effective_line == 5
    assert token.effective_column == 10


def test_whitespace_with_embedded_break_only_keeps_raw_position() -> None:
    token = _whitespace("  \n  ")

    assert token.effective_line == 5
    assert token.effective_column == 10


def test_non_whitespace_kind_is_never_adjusted() -> None:
    token = Token(kind=tokenize.STRING, text='"""\n\nx"""', raw_line=3, raw_column=4)

    assert token.effective_line == 3
    assert token.effective_column == 4


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("foo   ", "   "),
        ("foo\n  ", "  "),
        ("foo\n", ""),
        ("foo", ""),
        ("a\nb\n\t ", "\t "),
        ("x \t", " \t"),
    ],
)
def test_trailing_whitespace(text: str, expected: str) -> None:
    token = Token(kind=tokenize.COMMENT, text=text, raw_line=1, raw_column=1)

    assert token.trailing_whitespace == expected
    assert token.trailing_whitespace_length == len(expected)


def test_line_break_counters_ignore_carriage_returns() -> None:
    token = _whitespace("\r\n\r\n ")

    assert token.contains_line_break
    assert token.line_break_count == 2
    assert token.length == 5


def test_contains_whitespace_detects_each_character() -> None:
    for char in ("\r", "\n", "\t", " "):
        assert Token(kind=tokenize.OP, text=f"a{char}b", raw_line=1, raw_column=1).contains_whitespace
    assert not Token(kind=tokenize.NAME, text="name", raw_line=1, raw_column=1).contains_whitespace


def test_name_uses_kind_table() -> None:
    assert _whitespace(" ").name == "WHITESPACE"
    assert Token(kind=tokenize.NAME, text="x", raw_line=1, raw_column=1).name == "NAME"
    assert Token(kind=99999, text="x", raw_line=1, raw_column=1).name == "UNKNOWN(99999)"


def test_path_is_not_part_of_equality() -> None:
    first = Token(kind=tokenize.NAME, text="x", raw_line=1, raw_column=1, path=Path("a.py"))
    second = dataclasses.replace(first, path=Path("b.py"))

    assert first == second


def test_token_is_immutable() -> None:
    token = _whitespace(" ")

    with pytest.raises(dataclasses.FrozenInstanceError):
        token.text = "changed"  # type: ignore[misc]

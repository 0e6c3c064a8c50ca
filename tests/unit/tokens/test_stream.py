# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Unit tests for TokenStream cursor semantics."""

from __future__ import annotations

from pathlib import Path

import pytest

from lexcheck.tokens import TokenStream, tokenize_source

pytestmark = pytest.mark.unit


@pytest.fixture
def stream() -> TokenStream:
    return tokenize_source(Path("sample.py"), "a = b\n")


def test_read_walks_every_token_then_returns_none(stream: TokenStream) -> None:
    seen = []
    token = stream.read()
    while token is not None:
        seen.append(token.text)
        token = stream.read()

    assert "".join(seen) == "a = b\n"
    assert stream.at_end
    assert stream.read() is None


def test_rewind_restarts_from_first_token(stream: TokenStream) -> None:
    first = stream.read()
    _ = stream.read()
    stream.rewind()

    assert stream.position == 0
    assert stream.read() == first


def test_peek_does_not_move_cursor(stream: TokenStream) -> None:
    peeked = stream.peek()
    ahead = stream.peek(2)

    assert stream.position == 0
    assert peeked == stream[0]
    assert ahead == stream[2]
    assert stream.peek(100) is None
    assert stream.peek(-1) is None


def test_previous_and_following_use_token_index(stream: TokenStream) -> None:
    middle = stream[2]

    assert stream.previous(middle) == stream[1]
    assert stream.following(middle) == stream[3]
    assert stream.previous(stream[0]) is None
    assert stream.following(stream[-1]) is None


def test_sequence_access_is_read_only(stream: TokenStream) -> None:
    assert len(stream) == 6
    assert stream[1:3] == (stream[1], stream[2])
    assert list(stream) == [stream[index] for index in range(len(stream))]
    assert "TokenStream(path=sample.py" in repr(stream)


def test_iteration_does_not_touch_cursor(stream: TokenStream) -> None:
    _ = stream.read()
    _ = list(stream)

    assert stream.position == 1


def test_empty_stream() -> None:
    empty = TokenStream(Path("empty.py"))

    assert empty.at_end
    assert empty.text == ""
    assert empty.peek() is None

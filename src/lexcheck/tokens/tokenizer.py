# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Convert Python source text into a lossless ``TokenStream``.

Lexical splitting is delegated to the standard ``tokenize`` module. Its
output is not lossless on its own: spaces between tokens, backslash line
joins and similar material are skipped. Every skipped range becomes a
synthetic token here, so joining the text of all tokens gives back the
exact source. Runs of non-logical newlines and surrounding blanks are merged
into one ``WHITESPACE`` token. Token text is always sliced from the source
rather than taken from the lexer, and positions are recomputed from the
consumed text.
"""

from __future__ import annotations

import io
import logging
import re
import tokenize
from typing import TYPE_CHECKING, Final

from lexcheck._internal.exceptions import LexcheckError
from lexcheck._internal.logging_utils import structured_extra
from lexcheck.core.model_types import LogComponent

from .kinds import WHITESPACE, gap_kind, kind_for, token_names
from .stream import TokenStream
from .token import Token

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

logger: logging.Logger = logging.getLogger("lexcheck.tokenizer")

type _Span = tuple[int, int, int]

_LONE_CR: Final[re.Pattern[str]] = re.compile(r"\r(?!\n)")


class TokenizeError(LexcheckError):
    """Raised when the lexer rejects a file's text."""

    def __init__(self, path: Path, line: int, message: str) -> None:
        self.path = path
        self.line = line
        self.message = message
        super().__init__(f"Cannot tokenize {path} (line {line}): {message}")


def _line_starts(source: str) -> list[int]:
    starts = [0]
    position = source.find("\n")
    while position >= 0:
        starts.append(position + 1)
        position = source.find("\n", position + 1)
    return starts


def _offset(starts: list[int], size: int, row: int, column: int) -> int:
    if row - 1 >= len(starts):
        return size
    return min(starts[row - 1] + column, size)


def _error_details(exc: tokenize.TokenError | SyntaxError) -> tuple[int, str]:
    if isinstance(exc, SyntaxError):
        return exc.lineno or 0, exc.msg
    message = str(exc.args[0]) if exc.args else str(exc)
    location = exc.args[1] if len(exc.args) > 1 else None
    line = location[0] if isinstance(location, tuple) and location else 0
    return int(line), message


def _lexer_spans(path: Path, source: str) -> Iterator[_Span]:
    # A lone "\r" ends a line for the compiler but not for the lexer.
    lexed = _LONE_CR.sub("\n", source)
    starts = _line_starts(lexed)
    size = len(source)
    cursor = 0
    try:
        for info in tokenize.generate_tokens(io.StringIO(lexed).readline):
            start = max(_offset(starts, size, *info.start), cursor)
            if info.type in {tokenize.NEWLINE, tokenize.NL} and info.string:
                # The whole physical terminator, "\r\n" included.
                if start > cursor and source[start - 1] == "\r":
                    start -= 1
                end = _offset(starts, size, info.start[0] + 1, 0)
            else:
                end = _offset(starts, size, *info.end)
            if end <= start:
                continue
            if start > cursor:
                yield gap_kind(source[cursor:start]), cursor, start
            yield kind_for(info), start, end
            cursor = end
    except (tokenize.TokenError, SyntaxError) as exc:
        line, message = _error_details(exc)
        raise TokenizeError(path, line, message) from exc
    if cursor < size:
        yield gap_kind(source[cursor:]), cursor, size


def _merge_whitespace(spans: Iterator[_Span]) -> list[_Span]:
    merged: list[_Span] = []
    for span in spans:
        if merged and span[0] == WHITESPACE and merged[-1][0] == WHITESPACE:
            merged[-1] = (WHITESPACE, merged[-1][1], span[2])
        else:
            merged.append(span)
    return merged


def tokenize_source(path: Path, source: str) -> TokenStream:
    """Tokenize one file's source text.

    Args:
        path: File the text was read from; attached to every token.
        source: Complete source text. Empty text yields an empty stream.

    Returns:
        A ``TokenStream`` whose tokens concatenate back to ``source``.

    Raises:
        TokenizeError: If the lexer cannot process the text.
    """
    token_names()
    tokens: list[Token] = []
    line = 1
    column = 1
    for index, (kind, start, end) in enumerate(_merge_whitespace(_lexer_spans(path, source))):
        text = source[start:end]
        tokens.append(Token(kind=kind, text=text, raw_line=line, raw_column=column, index=index, path=path))
        breaks = text.count("\n")
        if breaks:
            line += breaks
            column = len(text) - text.rfind("\n")
        else:
            column += len(text)
    logger.debug(
        "Tokenized %s into %s tokens",
        path,
        len(tokens),
        extra=structured_extra(LogComponent.TOKENIZER, path=path),
    )
    return TokenStream(path, tokens)


__all__ = ["TokenizeError", "tokenize_source"]

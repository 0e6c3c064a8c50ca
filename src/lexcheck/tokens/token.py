# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""The ``Token`` value type.

A token wraps one lexeme together with the line and column of its first
character. Those raw positions come straight from the tokenizer. The
``effective_*`` accessors give the position a reader would expect instead:
a whitespace token that starts with line breaks is reported on the line
where those breaks end, at column 1.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final

from .kinds import is_whitespace, token_name

_TRAILING_BLANKS: Final[re.Pattern[str]] = re.compile(r"[ \t\r\f\v]*\Z")
_WHITESPACE_CHARS: Final[frozenset[str]] = frozenset("\r\n\t ")


def _leading_line_breaks(text: str) -> int:
    return len(text) - len(text.lstrip("\n"))


@dataclass(slots=True, frozen=True)
class Token:
    """Immutable lexical unit with its source position.

    Attributes:
        kind: Numeric kind (see ``lexcheck.tokens.kinds``).
        text: Exact source text of the token, never trimmed.
        raw_line: 1-based line of the first character.
        raw_column: 1-based column of the first character.
        index: Position of the token within its file's sequence.
        path: File the token belongs to. Not part of equality.
    """

    kind: int
    text: str
    raw_line: int
    raw_column: int
    index: int = 0
    path: Path = field(default=Path(), compare=False, repr=False)

    @property
    def name(self) -> str:
        return token_name(self.kind)

    @property
    def effective_line(self) -> int:
        if is_whitespace(self.kind):
            return self.raw_line + _leading_line_breaks(self.text)
        return self.raw_line

    @property
    def effective_column(self) -> int:
        if is_whitespace(self.kind) and _leading_line_breaks(self.text) > 0:
            return 1
        return self.raw_column

    @property
    def length(self) -> int:
        return len(self.text)

    @property
    def contains_line_break(self) -> bool:
        return "\n" in self.text

    @property
    def line_break_count(self) -> int:
        """Number of line feeds in the text. Carriage returns are not counted."""
        return self.text.count("\n")

    @property
    def contains_whitespace(self) -> bool:
        return any(char in _WHITESPACE_CHARS for char in self.text)

    @property
    def trailing_whitespace(self) -> str:
        """Whitespace at the end of the token, or whatever follows its last line feed.

        Without a line feed this is the maximal whitespace suffix. With one,
        it is the text after the last line feed (empty when the line feed is
        the final character).
        """
        position = self.text.rfind("\n")
        if position < 0:
            match = _TRAILING_BLANKS.search(self.text)
            return match.group(0) if match else ""
        return self.text[position + 1 :]

    @property
    def trailing_whitespace_length(self) -> int:
        return len(self.trailing_whitespace)


__all__ = ["Token"]

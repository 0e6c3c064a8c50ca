# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Whitespace hygiene rules."""

from __future__ import annotations

import re
import tokenize
from typing import TYPE_CHECKING, ClassVar, Final, override

from lexcheck.core.model_types import SeverityLevel
from lexcheck.rules.base import BaseRule
from lexcheck.tokens import WHITESPACE

if TYPE_CHECKING:
    from lexcheck.result import DiagnosticSink
    from lexcheck.tokens import TokenStream

_BLANKS: Final[re.Pattern[str]] = re.compile(r"[ \t]+\Z")


class TrailingWhitespaceRule(BaseRule):
    """Flag spaces or tabs directly before a line break."""

    name: ClassVar[str] = "trailing-whitespace"
    summary: ClassVar[str] = "Lines must not end with spaces or tabs."
    severity: SeverityLevel = SeverityLevel.WARNING

    @override
    def check(self, stream: TokenStream, sink: DiagnosticSink) -> None:
        # Start (line, column) of the blank run ending the current line, if any.
        pending: tuple[int, int] | None = None
        token = stream.read()
        while token is not None:
            segments = token.text.split("\n")
            for offset, segment in enumerate(segments):
                line = token.raw_line + offset
                column = token.raw_column if offset == 0 else 1
                if offset > 0:
                    if pending is not None:
                        sink.report(self.severity, *pending, "Trailing whitespace")
                    pending = None
                segment = segment.removesuffix("\r") if offset < len(segments) - 1 else segment
                if not segment:
                    continue
                match = _BLANKS.search(segment)
                if match is None:
                    pending = None
                elif match.start() > 0 or pending is None:
                    pending = (line, column + match.start())
            token = stream.read()


class TabIndentationRule(BaseRule):
    """Flag tab characters in leading indentation."""

    name: ClassVar[str] = "tab-indentation"
    summary: ClassVar[str] = "Indentation must use spaces, not tabs."

    @override
    def check(self, stream: TokenStream, sink: DiagnosticSink) -> None:
        token = stream.read()
        while token is not None:
            if token.kind in {WHITESPACE, tokenize.INDENT}:
                if token.contains_line_break:
                    indentation = token.trailing_whitespace
                    line = token.raw_line + token.line_break_count
                elif token.raw_column == 1:
                    indentation = token.text
                    line = token.raw_line
                else:
                    indentation = ""
                    line = token.raw_line
                position = indentation.find("\t")
                if position >= 0:
                    sink.report(self.severity, line, position + 1, "Indentation contains a tab character")
            token = stream.read()

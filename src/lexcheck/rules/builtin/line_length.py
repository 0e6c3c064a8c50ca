# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, cast, override

from pydantic import Field

from lexcheck.core.model_types import SeverityLevel
from lexcheck.rules.base import BaseRule, RuleOptions

if TYPE_CHECKING:
    from lexcheck.result import DiagnosticSink
    from lexcheck.tokens import Token, TokenStream


class LineLengthOptions(RuleOptions):
    max_length: int = Field(default=99, ge=1)


class LineLengthRule(BaseRule):
    """Flag physical lines longer than ``max_length`` characters."""

    name: ClassVar[str] = "line-length"
    summary: ClassVar[str] = "Physical lines must not exceed the configured length."
    severity: SeverityLevel = SeverityLevel.WARNING
    options_model: ClassVar[type[RuleOptions]] = LineLengthOptions

    @property
    def max_length(self) -> int:
        return cast("LineLengthOptions", self.options).max_length

    @override
    def check(self, stream: TokenStream, sink: DiagnosticSink) -> None:
        last: Token | None = None
        token = stream.read()
        while token is not None:
            if token.contains_line_break:
                segments = token.text.split("\n")
                self._check_width(sink, token.raw_line, token.raw_column - 1 + len(segments[0].rstrip("\r")))
                for offset, segment in enumerate(segments[1:-1], start=1):
                    self._check_width(sink, token.raw_line + offset, len(segment.rstrip("\r")))
            last = token
            token = stream.read()
        if last is not None and not last.text.endswith("\n"):
            if last.contains_line_break:
                width = len(last.text) - last.text.rfind("\n") - 1
            else:
                width = last.raw_column - 1 + last.length
            self._check_width(sink, last.raw_line + last.line_break_count, width)

    def _check_width(self, sink: DiagnosticSink, line: int, width: int) -> None:
        if width > self.max_length:
            sink.report(
                self.severity,
                line,
                self.max_length + 1,
                f"Line too long ({width} > {self.max_length} characters)",
            )

# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, cast, override

from pydantic import Field

from lexcheck.core.model_types import SeverityLevel
from lexcheck.rules.base import BaseRule, RuleOptions
from lexcheck.tokens import WHITESPACE

if TYPE_CHECKING:
    from lexcheck.result import DiagnosticSink
    from lexcheck.tokens import TokenStream


class BlankLinesOptions(RuleOptions):
    max_blank_lines: int = Field(default=2, ge=0)


class BlankLinesRule(BaseRule):
    """Flag runs of consecutive blank lines longer than ``max_blank_lines``."""

    name: ClassVar[str] = "blank-lines"
    summary: ClassVar[str] = "Limit the number of consecutive blank lines."
    severity: SeverityLevel = SeverityLevel.WARNING
    options_model: ClassVar[type[RuleOptions]] = BlankLinesOptions

    @property
    def max_blank_lines(self) -> int:
        return cast("BlankLinesOptions", self.options).max_blank_lines

    @override
    def check(self, stream: TokenStream, sink: DiagnosticSink) -> None:
        token = stream.read()
        while token is not None:
            if token.kind == WHITESPACE and token.contains_line_break:
                # A run that starts mid-line first terminates that non-blank line.
                starts_line = token.raw_column == 1
                blank = token.line_break_count if starts_line else token.line_break_count - 1
                if blank > self.max_blank_lines:
                    first_blank = token.raw_line if starts_line else token.raw_line + 1
                    sink.report(
                        self.severity,
                        first_blank + self.max_blank_lines,
                        1,
                        f"Too many blank lines ({blank} > {self.max_blank_lines})",
                    )
            token = stream.read()

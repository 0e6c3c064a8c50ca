# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""The rule contract.

A rule inspects one file's ``TokenStream`` and reports findings through the
``DiagnosticSink`` it is handed. The engine rewinds the stream before every
call and scopes the sink to the file being checked. Rules keep no state
between files; options are fixed when the rule is constructed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict

from lexcheck._internal.exceptions import LexcheckError
from lexcheck.core.model_types import SeverityLevel
from lexcheck.core.type_aliases import RuleName

if TYPE_CHECKING:
    from pathlib import Path

    from lexcheck.result import DiagnosticSink
    from lexcheck.tokens import Token, TokenStream


class RuleExecutionError(LexcheckError):
    """Raised when a rule cannot finish checking a file."""

    def __init__(self, rule: str, path: Path, message: str) -> None:
        self.rule = RuleName(rule)
        self.path = path
        self.message = message
        super().__init__(f"Rule '{rule}' failed on {path}: {message}")


@runtime_checkable
class Rule(Protocol):
    name: str
    severity: SeverityLevel

    def check(self, stream: TokenStream, sink: DiagnosticSink) -> None: ...


class RuleOptions(BaseModel):
    """Base model for per-rule options. Rules without options use it as-is."""

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid", frozen=True)


class BaseRule:
    """Convenience base class for rules.

    Subclasses set ``name``, optionally ``severity`` and ``options_model``,
    and implement ``check``.
    """

    name: ClassVar[str] = ""
    summary: ClassVar[str] = ""
    severity: SeverityLevel = SeverityLevel.ERROR
    options_model: ClassVar[type[RuleOptions]] = RuleOptions

    def __init__(self, options: RuleOptions | None = None, *, severity: SeverityLevel | None = None) -> None:
        self.options = options if options is not None else self.options_model()
        if severity is not None:
            self.severity = severity

    def check(self, stream: TokenStream, sink: DiagnosticSink) -> None:
        raise NotImplementedError

    def report(self, sink: DiagnosticSink, token: Token, message: str) -> None:
        sink.report_token(token, message, self.severity)

    def fail(self, stream: TokenStream, message: str) -> RuleExecutionError:
        return RuleExecutionError(self.name, stream.path, message)


__all__ = ["BaseRule", "Rule", "RuleExecutionError", "RuleOptions"]

# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Core data classes for analysis diagnostics.

A ``Diagnostic`` is the unit every producer in lexcheck emits: rules report
them through a ``DiagnosticSink``, and the engine records them for syntax
pre-check failures, tokenizer failures, and rule crashes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .model_types import DiagnosticSource, SeverityLevel

if TYPE_CHECKING:
    from pathlib import Path

    from lexcheck.json import JSONMapping

    from .type_aliases import RuleName


@dataclass(slots=True, frozen=True)
class Diagnostic:
    """Immutable dataclass representing a single finding.

    Attributes:
        path: File the finding belongs to.
        severity: Error or warning.
        line: 1-indexed line, or 0 when the finding has no position.
        column: 1-indexed column, or 0 when the finding has no position.
        message: Human-readable description.
        source: Producer category (rule, syntax pre-check, rule failure, tokenizer).
        rule: Name of the reporting rule, if any.
    """

    path: Path
    severity: SeverityLevel
    line: int
    column: int
    message: str
    source: DiagnosticSource = DiagnosticSource.RULE
    rule: RuleName | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is SeverityLevel.ERROR

    @property
    def has_position(self) -> bool:
        return self.line > 0

    def to_payload(self) -> JSONMapping:
        return {
            "severity": self.severity.value,
            "line": self.line,
            "column": self.column,
            "message": self.message,
            "source": self.source.value,
            "rule": self.rule,
        }


__all__ = ["Diagnostic"]

# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Aggregation of diagnostics for one analysis run.

``Result`` keeps files in registration (discovery) order and each file's
diagnostics in detection order. Rules never touch it directly: they receive
a ``DiagnosticSink`` bound to the file being checked, which can only append
to that file.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, override

from lexcheck._internal.exceptions import LexcheckValidationError
from lexcheck.core.model_types import DiagnosticSource, FileStatus, SeverityLevel
from lexcheck.core.types import Diagnostic

if TYPE_CHECKING:
    from pathlib import Path

    from lexcheck.core.type_aliases import RuleName
    from lexcheck.json import JSONMapping
    from lexcheck.tokens import Token

_SYNTAX_SOURCES = frozenset({DiagnosticSource.SYNTAX, DiagnosticSource.TOKENIZER})


class UnregisteredFileError(LexcheckValidationError):
    """Raised when a diagnostic or query names a file the result does not know."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"File '{path}' has not been registered with the result")


class DiagnosticSink:
    """Append-only reporting capability scoped to one file (and optionally one rule)."""

    __slots__ = ("_append", "_path", "_rule")

    def __init__(self, path: Path, append: Callable[[Diagnostic], None], *, rule: RuleName | None = None) -> None:
        self._path = path
        self._append = append
        self._rule = rule

    @property
    def path(self) -> Path:
        return self._path

    @property
    def rule(self) -> RuleName | None:
        return self._rule

    def report(self, severity: SeverityLevel, line: int, column: int, message: str) -> Diagnostic:
        diagnostic = Diagnostic(
            path=self._path,
            severity=severity,
            line=line,
            column=column,
            message=message,
            source=DiagnosticSource.RULE,
            rule=self._rule,
        )
        self._append(diagnostic)
        return diagnostic

    def error(self, line: int, column: int, message: str) -> Diagnostic:
        return self.report(SeverityLevel.ERROR, line, column, message)

    def warning(self, line: int, column: int, message: str) -> Diagnostic:
        return self.report(SeverityLevel.WARNING, line, column, message)

    def report_token(
        self,
        token: Token,
        message: str,
        severity: SeverityLevel = SeverityLevel.ERROR,
    ) -> Diagnostic:
        """Report at the position a reader would expect for ``token``."""
        return self.report(severity, token.effective_line, token.effective_column, message)


class Result:
    """Ordered collection of files and the diagnostics recorded against them."""

    __slots__ = ("_diagnostics",)

    __hash__ = None  # type: ignore[assignment]

    def __init__(self) -> None:
        self._diagnostics: dict[Path, list[Diagnostic]] = {}

    def add_file(self, path: Path) -> None:
        """Register ``path``. Registering a known file again changes nothing."""
        self._diagnostics.setdefault(path, [])

    def add_diagnostic(self, diagnostic: Diagnostic) -> None:
        self._bucket(diagnostic.path).append(diagnostic)

    def extend(self, path: Path, diagnostics: Iterable[Diagnostic]) -> None:
        bucket = self._bucket(path)
        for diagnostic in diagnostics:
            if diagnostic.path != path:
                raise UnregisteredFileError(diagnostic.path)
            bucket.append(diagnostic)

    def sink(self, path: Path, *, rule: RuleName | None = None) -> DiagnosticSink:
        bucket = self._bucket(path)
        return DiagnosticSink(path, bucket.append, rule=rule)

    @property
    def files(self) -> tuple[Path, ...]:
        return tuple(self._diagnostics)

    def diagnostics(self, path: Path | None = None) -> list[Diagnostic]:
        if path is not None:
            return list(self._bucket(path))
        return [diag for bucket in self._diagnostics.values() for diag in bucket]

    def errors(self, path: Path | None = None) -> list[Diagnostic]:
        return [diag for diag in self.diagnostics(path) if diag.is_error]

    def warnings(self, path: Path | None = None) -> list[Diagnostic]:
        return [diag for diag in self.diagnostics(path) if diag.severity is SeverityLevel.WARNING]

    def has_errors(self, path: Path | None = None) -> bool:
        return any(diag.is_error for diag in self.diagnostics(path))

    def has_warnings(self, path: Path | None = None) -> bool:
        return any(diag.severity is SeverityLevel.WARNING for diag in self.diagnostics(path))

    def severity_counts(self, path: Path | None = None) -> Counter[SeverityLevel]:
        counts: Counter[SeverityLevel] = Counter()
        for diag in self.diagnostics(path):
            counts[diag.severity] += 1
        return counts

    @property
    def number_of_files(self) -> int:
        return len(self._diagnostics)

    @property
    def number_of_errors(self) -> int:
        return self.severity_counts()[SeverityLevel.ERROR]

    @property
    def number_of_warnings(self) -> int:
        return self.severity_counts()[SeverityLevel.WARNING]

    def status(self, path: Path) -> FileStatus:
        bucket = self._bucket(path)
        if any(diag.source in _SYNTAX_SOURCES for diag in bucket):
            return FileStatus.SYNTAX_ERROR
        if any(diag.is_error for diag in bucket):
            return FileStatus.FAILED
        return FileStatus.PASSED

    def to_payload(self) -> JSONMapping:
        return {
            "summary": {
                "files": self.number_of_files,
                "errors": self.number_of_errors,
                "warnings": self.number_of_warnings,
            },
            "files": [
                {
                    "path": path.as_posix(),
                    "status": self.status(path).value,
                    "diagnostics": [diag.to_payload() for diag in bucket],
                }
                for path, bucket in self._diagnostics.items()
            ],
        }

    def _bucket(self, path: Path) -> list[Diagnostic]:
        try:
            return self._diagnostics[path]
        except KeyError:
            raise UnregisteredFileError(path) from None

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return list(self._diagnostics.items()) == list(other._diagnostics.items())

    @override
    def __repr__(self) -> str:
        return (
            f"Result(files={self.number_of_files}, errors={self.number_of_errors}, "
            f"warnings={self.number_of_warnings})"
        )


__all__ = ["DiagnosticSink", "Result", "UnregisteredFileError"]

# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Human and machine readable rendering of analysis results."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from lexcheck.core.model_types import DiagnosticSource
from lexcheck.json import dumps

if TYPE_CHECKING:
    from collections.abc import Callable

    from lexcheck.core.types import Diagnostic
    from lexcheck.engine import FileReport
    from lexcheck.result import Result

PROGRESS_WIDTH: Final[int] = 59


class ProgressPrinter:
    """Write one status glyph per finished file, wrapping long runs.

    Use an instance directly as the engine's ``on_file`` callback.
    """

    def __init__(self, write: Callable[[str], object], *, width: int = PROGRESS_WIDTH) -> None:
        self._write = write
        self._width = width
        self._column = 0
        self._count = 0

    @property
    def count(self) -> int:
        return self._count

    def glyph(self, glyph: str) -> None:
        if self._column >= self._width:
            self._write("\n")
            self._column = 0
        self._write(glyph)
        self._column += 1
        self._count += 1

    def __call__(self, report: FileReport) -> None:
        self.glyph(report.status.glyph)


def format_diagnostic(diagnostic: Diagnostic) -> str:
    if diagnostic.source is DiagnosticSource.SYNTAX or not diagnostic.has_position:
        return diagnostic.message
    label = diagnostic.severity.value.capitalize()
    return f"Line {diagnostic.line}, column {diagnostic.column}: {label}: {diagnostic.message}"


def render_summary(result: Result, *, show_warnings: bool = False) -> str:
    """Return the end-of-run summary.

    A run without errors prints ``OK``. Otherwise each file with errors is
    listed with its findings, followed by ``FAIL``. Both end with the file,
    error and warning counts. Warnings are listed only with
    ``show_warnings``.
    """
    lines: list[str] = []
    for path in result.files:
        findings = result.diagnostics(path) if show_warnings else result.errors(path)
        if not findings:
            continue
        lines.append(f"{path}:")
        lines.extend(format_diagnostic(diagnostic) for diagnostic in findings)
        lines.append("")
    verdict = "FAIL" if result.has_errors() else "OK"
    lines.append(
        f"{verdict} ({result.number_of_files} files, {result.number_of_errors} errors, "
        f"{result.number_of_warnings} warnings)",
    )
    return "\n".join(lines)


def render_json(result: Result) -> str:
    return dumps(result.to_payload())


__all__ = ["PROGRESS_WIDTH", "ProgressPrinter", "format_diagnostic", "render_json", "render_summary"]

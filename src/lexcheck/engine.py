# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Analysis engine.

``analyze`` runs the configured rules over each file and collects the
findings into a ``Result``. Each file goes through the same pipeline:

1. the optional syntax pre-check; a failure is recorded and ends the file,
2. reading and tokenizing the source once,
3. every rule in order, each on a rewound stream with a sink scoped to the
   file and the rule.

Problems that belong to one file (unreadable source, tokenizer rejection, a
crashing rule) become diagnostics and never stop the run. Files may be
analysed on a thread pool; the returned ``Result`` is always merged in the
order the files were given, so it does not depend on scheduling.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable, Sequence
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from lexcheck._internal.exceptions import LexcheckValidationError
from lexcheck._internal.logging_utils import structured_extra
from lexcheck._internal.utils import dedupe_preserve
from lexcheck.core.model_types import DiagnosticSource, FileStatus, LogComponent, SeverityLevel
from lexcheck.core.type_aliases import RuleName
from lexcheck.core.types import Diagnostic
from lexcheck.result import Result
from lexcheck.rules.base import Rule, RuleExecutionError
from lexcheck.syntax import SyntaxChecker, first_line
from lexcheck.tokens import TokenizeError, TokenStream, tokenize_source

logger: logging.Logger = logging.getLogger("lexcheck.engine")

type SourceReader = Callable[[Path], str]
type Tokenizer = Callable[[Path, str], TokenStream]
type FileCallback = Callable[[FileReport], None]

SOURCE_ENCODING: Final[str] = "utf-8-sig"


@dataclass(slots=True, frozen=True)
class FileReport:
    """Outcome of analysing one file, emitted once the file is finished."""

    path: Path
    status: FileStatus
    diagnostics: tuple[Diagnostic, ...]
    duration_ms: float


def read_source(path: Path) -> str:
    """Read ``path`` as UTF-8 without translating line endings."""
    with path.open(encoding=SOURCE_ENCODING, newline="") as handle:
        return handle.read()


@dataclass(slots=True, frozen=True)
class _Pipeline:
    rules: tuple[Rule, ...]
    syntax_checker: SyntaxChecker | None
    read_source: SourceReader
    tokenizer: Tokenizer

    def run(self, path: Path) -> FileReport:
        start = time.perf_counter()
        local = Result()
        local.add_file(path)
        self._analyse(path, local)
        duration_ms = (time.perf_counter() - start) * 1000
        report = FileReport(
            path=path,
            status=local.status(path),
            diagnostics=tuple(local.diagnostics(path)),
            duration_ms=duration_ms,
        )
        logger.debug(
            "Analysed %s (%s)",
            path,
            report.status,
            extra=structured_extra(
                LogComponent.ENGINE,
                path=path,
                duration_ms=duration_ms,
                counts=local.severity_counts(path),
            ),
        )
        return report

    def _analyse(self, path: Path, local: Result) -> None:
        if self.syntax_checker is not None:
            report = self.syntax_checker.check(path)
            if report:
                local.add_diagnostic(
                    Diagnostic(
                        path=path,
                        severity=SeverityLevel.ERROR,
                        line=0,
                        column=0,
                        message=first_line(report),
                        source=DiagnosticSource.SYNTAX,
                    ),
                )
                return
        try:
            source = self.read_source(path)
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning(
                "Cannot read %s: %s",
                path,
                exc,
                extra=structured_extra(LogComponent.ENGINE, path=path),
            )
            local.add_diagnostic(
                Diagnostic(
                    path=path,
                    severity=SeverityLevel.ERROR,
                    line=0,
                    column=0,
                    message=f"Cannot read file: {exc}",
                    source=DiagnosticSource.TOKENIZER,
                ),
            )
            return
        try:
            stream = self.tokenizer(path, source)
        except TokenizeError as exc:
            local.add_diagnostic(
                Diagnostic(
                    path=path,
                    severity=SeverityLevel.ERROR,
                    line=exc.line,
                    column=1 if exc.line > 0 else 0,
                    message=f"Cannot tokenize file: {exc.message}",
                    source=DiagnosticSource.TOKENIZER,
                ),
            )
            return
        for rule in self.rules:
            self._run_rule(rule, stream, local)

    def _run_rule(self, rule: Rule, stream: TokenStream, local: Result) -> None:
        path = stream.path
        name = RuleName(rule.name)
        stream.rewind()
        try:
            rule.check(stream, local.sink(path, rule=name))
        except RuleExecutionError as exc:
            failure = exc
        except Exception as exc:  # noqa: BLE001 - recorded as a rule-failure diagnostic
            failure = RuleExecutionError(name, path, f"{type(exc).__name__}: {exc}")
            failure.__cause__ = exc
        else:
            return
        logger.warning(
            "%s",
            failure,
            exc_info=failure,
            extra=structured_extra(LogComponent.ENGINE, path=path, rule=name),
        )
        local.add_diagnostic(
            Diagnostic(
                path=path,
                severity=SeverityLevel.ERROR,
                line=0,
                column=0,
                message=f"Rule '{name}' failed: {failure.message}",
                source=DiagnosticSource.RULE_FAILURE,
                rule=name,
            ),
        )


def _run_parallel(
    pipeline: _Pipeline,
    paths: Sequence[Path],
    workers: int,
    on_file: FileCallback | None,
) -> dict[Path, FileReport]:
    reports: dict[Path, FileReport] = {}
    with ThreadPoolExecutor(max_workers=min(workers, len(paths)), thread_name_prefix="lexcheck") as executor:
        futures: list[Future[FileReport]] = [executor.submit(pipeline.run, path) for path in paths]
        try:
            for future in as_completed(futures):
                report = future.result()
                reports[report.path] = report
                if on_file is not None:
                    on_file(report)
        except BaseException:
            for pending in futures:
                pending.cancel()
            raise
    return reports


def analyze(
    files: Iterable[Path],
    rules: Sequence[Rule],
    *,
    syntax_checker: SyntaxChecker | None = None,
    read_source: SourceReader = read_source,
    tokenizer: Tokenizer = tokenize_source,
    workers: int = 1,
    on_file: FileCallback | None = None,
) -> Result:
    """Analyse ``files`` with ``rules`` and return the collected findings.

    Args:
        files: Files in discovery order. Repeated paths are analysed once.
        rules: Rules to run, in order, on every file.
        syntax_checker: Optional pre-check; files it rejects are not
            tokenized and no rule sees them.
        read_source: Callable returning a file's text.
        tokenizer: Callable turning a file's text into a ``TokenStream``.
        workers: Number of files analysed concurrently.
        on_file: Called with a ``FileReport`` as each file finishes. With
            several workers, calls arrive in completion order.

    Returns:
        A ``Result`` listing files in the order given, with each file's
        diagnostics in detection order.

    Raises:
        LexcheckValidationError: If ``workers`` is smaller than one.
        ConfigurationError: If a collaborator fails for the whole run (for
            example the syntax checker cannot be started).
    """
    if workers < 1:
        message = f"workers must be at least 1, got {workers}"
        raise LexcheckValidationError(message)
    paths = dedupe_preserve(files)
    pipeline = _Pipeline(
        rules=tuple(rules),
        syntax_checker=syntax_checker,
        read_source=read_source,
        tokenizer=tokenizer,
    )
    start = time.perf_counter()
    result = Result()
    if workers == 1 or len(paths) <= 1:
        for path in paths:
            report = pipeline.run(path)
            if on_file is not None:
                on_file(report)
            result.add_file(path)
            result.extend(path, report.diagnostics)
    else:
        reports = _run_parallel(pipeline, paths, workers, on_file)
        for path in paths:
            result.add_file(path)
            result.extend(path, reports[path].diagnostics)
    logger.info(
        "Analysed %s files with %s rules",
        result.number_of_files,
        len(pipeline.rules),
        extra=structured_extra(
            LogComponent.ENGINE,
            duration_ms=(time.perf_counter() - start) * 1000,
            counts=result.severity_counts(),
            details={"workers": workers},
        ),
    )
    return result


__all__ = ["FileReport", "analyze", "read_source"]

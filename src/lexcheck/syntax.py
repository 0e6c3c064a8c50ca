# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""External syntax pre-check.

Before a file is tokenized it can be compiled by a separate interpreter.
A file that does not compile gets a single syntax diagnostic and is not
tokenized or checked by any rule.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Final, Protocol, override, runtime_checkable

from lexcheck._internal.exceptions import ConfigurationError
from lexcheck._internal.logging_utils import structured_extra
from lexcheck._internal.utils import python_executable, run_command
from lexcheck.core.model_types import LogComponent

if TYPE_CHECKING:
    from pathlib import Path

logger: logging.Logger = logging.getLogger("lexcheck.syntax")

_CHECK_SNIPPET: Final[str] = """\
import sys
path = sys.argv[1]
try:
    with open(path, "rb") as handle:
        compile(handle.read(), path, "exec", dont_inherit=True)
except (SyntaxError, ValueError) as exc:
    message = getattr(exc, "msg", None) or str(exc)
    line = getattr(exc, "lineno", None) or 0
    print("%s: %s in %s on line %s" % (type(exc).__name__, message, path, line))
    sys.exit(1)
"""

FALLBACK_REPORT: Final[str] = "Syntax check failed"


class SyntaxCheckerUnavailableError(ConfigurationError):
    """Raised when the configured interpreter cannot be executed."""

    def __init__(self, executable: str, reason: str) -> None:
        self.executable = executable
        self.reason = reason
        super().__init__(f"Cannot run syntax checker '{executable}': {reason}")


@runtime_checkable
class SyntaxChecker(Protocol):
    def check(self, path: Path) -> str:
        """Return an empty string when ``path`` is valid, else a report."""
        ...


def first_line(report: str) -> str:
    """Return ``report`` up to its first line terminator.

    An empty first line yields ``FALLBACK_REPORT`` so a diagnostic never has
    a blank message.
    """
    line = report.partition("\n")[0].removesuffix("\r")
    return line or FALLBACK_REPORT


class PythonSyntaxChecker:
    """Compile each file with an external Python interpreter.

    The interpreter may differ from the one running lexcheck, so files are
    checked against the grammar of the project's own Python version.
    """

    def __init__(self, executable: str | None = None) -> None:
        self.executable = executable or python_executable()

    def verify(self) -> None:
        """Fail early if the interpreter cannot be started.

        Raises:
            SyntaxCheckerUnavailableError: If the interpreter is missing or
                exits with a non-zero status.
        """
        try:
            output = run_command([self.executable, "--version"])
        except OSError as exc:
            raise SyntaxCheckerUnavailableError(self.executable, str(exc)) from exc
        if output.exit_code != 0:
            reason = first_line(output.stderr or output.stdout)
            raise SyntaxCheckerUnavailableError(self.executable, reason)

    def check(self, path: Path) -> str:
        try:
            output = run_command([self.executable, "-c", _CHECK_SNIPPET, str(path)])
        except OSError as exc:
            raise SyntaxCheckerUnavailableError(self.executable, str(exc)) from exc
        if output.exit_code == 0:
            return ""
        report = (output.stdout or output.stderr).strip() or FALLBACK_REPORT
        logger.debug(
            "Syntax check failed for %s",
            path,
            extra=structured_extra(
                LogComponent.SYNTAX,
                path=path,
                exit_code=output.exit_code,
                duration_ms=output.duration_ms,
            ),
        )
        return report

    @override
    def __repr__(self) -> str:
        return f"PythonSyntaxChecker(executable={self.executable!r})"


__all__ = [
    "PythonSyntaxChecker",
    "SyntaxChecker",
    "SyntaxCheckerUnavailableError",
    "first_line",
]

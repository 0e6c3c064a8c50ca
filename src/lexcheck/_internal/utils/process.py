# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Child-process execution for the syntax pre-check."""

from __future__ import annotations

import logging
import subprocess  # noqa: S404  # JUSTIFIED: only caller passes a fixed interpreter argv
import sys
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

from lexcheck._internal.logging_utils import structured_extra
from lexcheck.core.model_types import LogComponent

if TYPE_CHECKING:
    from collections.abc import Sequence

logger: logging.Logger = logging.getLogger("lexcheck.internal.process")

__all__ = ["CommandOutput", "python_executable", "run_command"]


@dataclass(slots=True, frozen=True)
class CommandOutput:
    stdout: str
    stderr: str
    exit_code: int
    duration_ms: float


def run_command(argv: Sequence[str]) -> CommandOutput:
    """Run ``argv`` without a shell and capture its text output.

    Raises:
        ValueError: If ``argv`` is empty or its executable is blank.
        OSError: If the executable cannot be started.
    """
    if not argv or not argv[0]:
        raise ValueError("Command must name an executable")
    start = time.perf_counter()
    completed = subprocess.run(  # noqa: S603
        list(argv),
        check=False,
        capture_output=True,
        text=True,
    )
    duration_ms = (time.perf_counter() - start) * 1000
    logger.debug(
        "%s exited with %s",
        argv[0],
        completed.returncode,
        extra=structured_extra(LogComponent.SERVICES, exit_code=completed.returncode, duration_ms=duration_ms),
    )
    return CommandOutput(
        stdout=completed.stdout,
        stderr=completed.stderr,
        exit_code=completed.returncode,
        duration_ms=duration_ms,
    )


def python_executable() -> str:
    return sys.executable

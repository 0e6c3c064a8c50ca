# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Internal utility helpers shared across lexcheck layers."""

from __future__ import annotations

from .common import consume, dedupe_preserve
from .process import CommandOutput, python_executable, run_command

__all__ = [
    "CommandOutput",
    "consume",
    "dedupe_preserve",
    "python_executable",
    "run_command",
]

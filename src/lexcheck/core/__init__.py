# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Core value types shared by the tokenizer, rules, and engine."""

from __future__ import annotations

from .model_types import (
    DiagnosticSource,
    FailOnPolicy,
    FileStatus,
    LogComponent,
    LogFormat,
    OutputFormat,
    SeverityLevel,
)
from .type_aliases import RuleName
from .types import Diagnostic

__all__ = [
    "Diagnostic",
    "DiagnosticSource",
    "FailOnPolicy",
    "FileStatus",
    "LogComponent",
    "LogFormat",
    "OutputFormat",
    "RuleName",
    "SeverityLevel",
]

# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

from __future__ import annotations

from enum import StrEnum


class SeverityLevel(StrEnum):
    ERROR = "error"
    WARNING = "warning"

    @classmethod
    def from_str(cls, raw: str) -> SeverityLevel:
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            raise ValueError(f"Unknown severity '{raw}'") from exc


class DiagnosticSource(StrEnum):
    """Where a diagnostic came from.

    ``SYNTAX`` marks failures reported by the external pre-check, which are
    always errors and never carry a position.
    """

    RULE = "rule"
    SYNTAX = "syntax"
    RULE_FAILURE = "rule-failure"
    TOKENIZER = "tokenizer"


class FileStatus(StrEnum):
    PASSED = "passed"
    FAILED = "failed"
    SYNTAX_ERROR = "syntax-error"

    @property
    def glyph(self) -> str:
        match self:
            case FileStatus.PASSED:
                return "."
            case FileStatus.FAILED:
                return "F"
            case FileStatus.SYNTAX_ERROR:
                return "E"


class LogFormat(StrEnum):
    TEXT = "text"
    JSON = "json"

    @classmethod
    def from_str(cls, raw: str) -> LogFormat:
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            raise ValueError(f"Unknown log format '{raw}'") from exc


class LogComponent(StrEnum):
    ENGINE = "engine"
    CLI = "cli"
    RULES = "rules"
    TOKENIZER = "tokenizer"
    SYNTAX = "syntax"
    CONFIG = "config"
    SERVICES = "services"

    @classmethod
    def from_str(cls, raw: str) -> LogComponent:
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            raise ValueError(f"Unknown log component '{raw}'") from exc


class OutputFormat(StrEnum):
    TEXT = "text"
    JSON = "json"

    @classmethod
    def from_str(cls, raw: str) -> OutputFormat:
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            raise ValueError(f"Unknown output format '{raw}'") from exc


class FailOnPolicy(StrEnum):
    NEVER = "never"
    ERRORS = "errors"
    WARNINGS = "warnings"

    @classmethod
    def from_str(cls, raw: str) -> FailOnPolicy:
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            raise ValueError(f"Unknown fail-on policy '{raw}'") from exc


__all__ = [
    "DiagnosticSource",
    "FailOnPolicy",
    "FileStatus",
    "LogComponent",
    "LogFormat",
    "OutputFormat",
    "SeverityLevel",
]

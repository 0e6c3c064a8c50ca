# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Stable error codes for structured lexcheck exceptions."""

from __future__ import annotations

from collections.abc import Mapping
from typing import NewType

from lexcheck._internal.exceptions import (
    ConfigurationError,
    LexcheckError,
    LexcheckTypeError,
    LexcheckValidationError,
)
from lexcheck.config import (
    ConfigFieldChoiceError,
    ConfigReadError,
    ConfigValidationError,
    InvalidConfigFileError,
    UnsupportedConfigVersionError,
)
from lexcheck.discovery import PathNotFoundError
from lexcheck.result import UnregisteredFileError
from lexcheck.rules.base import RuleExecutionError
from lexcheck.rules.registry import (
    DuplicateRuleError,
    InvalidRuleOptionsError,
    RuleConfigurationError,
    UnknownRuleError,
)
from lexcheck.syntax import SyntaxCheckerUnavailableError
from lexcheck.tokens import TokenizeError

ErrorCode = NewType("ErrorCode", str)

_ERROR_CODES: dict[type[BaseException], ErrorCode] = {
    LexcheckError: ErrorCode("LX000"),
    LexcheckValidationError: ErrorCode("LX100"),
    LexcheckTypeError: ErrorCode("LX101"),
    UnregisteredFileError: ErrorCode("LX102"),
    ConfigurationError: ErrorCode("LX200"),
    ConfigValidationError: ErrorCode("LX210"),
    ConfigFieldChoiceError: ErrorCode("LX211"),
    UnsupportedConfigVersionError: ErrorCode("LX212"),
    ConfigReadError: ErrorCode("LX213"),
    InvalidConfigFileError: ErrorCode("LX214"),
    RuleConfigurationError: ErrorCode("LX220"),
    UnknownRuleError: ErrorCode("LX221"),
    DuplicateRuleError: ErrorCode("LX222"),
    InvalidRuleOptionsError: ErrorCode("LX223"),
    PathNotFoundError: ErrorCode("LX230"),
    SyntaxCheckerUnavailableError: ErrorCode("LX240"),
    RuleExecutionError: ErrorCode("LX300"),
    TokenizeError: ErrorCode("LX301"),
}


def error_code_for(exc: BaseException) -> ErrorCode:
    """Return a stable error code for a structured lexcheck exception."""
    for cls in type(exc).__mro__:
        code = _ERROR_CODES.get(cls)
        if code:
            return code
    return ErrorCode("LX000")


def error_code_catalog() -> Mapping[str, ErrorCode]:
    """Return a mapping of fully-qualified exception names to error codes."""
    result: dict[str, ErrorCode] = {}
    for exc_type, code in _ERROR_CODES.items():
        key = f"{exc_type.__module__}.{exc_type.__name__}"
        result[key] = code
    return result


__all__ = ["ErrorCode", "error_code_catalog", "error_code_for"]

# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Common exception hierarchy for lexcheck."""

from __future__ import annotations

__all__ = [
    "ConfigurationError",
    "LexcheckError",
    "LexcheckTypeError",
    "LexcheckValidationError",
]


class LexcheckError(Exception):
    """Base error for all lexcheck exceptions."""


class LexcheckValidationError(LexcheckError, ValueError):
    """Raised when input data fails validation checks."""


class LexcheckTypeError(LexcheckError, TypeError):
    """Raised when input data has an unexpected type."""


class ConfigurationError(LexcheckError):
    """Raised for run-scoped problems that must abort before any file is analysed."""

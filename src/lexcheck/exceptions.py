# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Public exception types re-exported from the internal package."""

from __future__ import annotations

from lexcheck._internal.exceptions import (
    ConfigurationError,
    LexcheckError,
    LexcheckTypeError,
    LexcheckValidationError,
)

__all__ = ["ConfigurationError", "LexcheckError", "LexcheckTypeError", "LexcheckValidationError"]

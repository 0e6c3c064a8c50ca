# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Configuration loading and validation."""

from __future__ import annotations

from .loader import CONFIG_FILENAMES, load_config, parse_config
from .models import (
    CONFIG_VERSION,
    Config,
    ConfigFieldChoiceError,
    ConfigModel,
    ConfigReadError,
    ConfigValidationError,
    InvalidConfigFileError,
    UnsupportedConfigVersionError,
    model_to_config,
)

__all__ = [
    "CONFIG_FILENAMES",
    "CONFIG_VERSION",
    "Config",
    "ConfigFieldChoiceError",
    "ConfigModel",
    "ConfigReadError",
    "ConfigValidationError",
    "InvalidConfigFileError",
    "UnsupportedConfigVersionError",
    "load_config",
    "model_to_config",
    "parse_config",
]

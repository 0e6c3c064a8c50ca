# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Configuration models for lexcheck.

``ConfigModel`` validates the raw TOML table with pydantic; ``Config`` is the
plain dataclass the rest of the program consumes once validation passed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar, Final, cast

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from lexcheck._internal.exceptions import ConfigurationError, LexcheckValidationError
from lexcheck._internal.utils import dedupe_preserve, python_executable
from lexcheck.core.model_types import FailOnPolicy
from lexcheck.core.type_aliases import RuleName
from lexcheck.discovery import DEFAULT_EXTENSIONS

if TYPE_CHECKING:
    from pathlib import Path

CONFIG_VERSION: Final[int] = 0
FAIL_ON_ALLOWED_VALUES: Final[tuple[str, ...]] = tuple(policy.value for policy in FailOnPolicy)
DEFAULT_EXCLUDE: Final[tuple[str, ...]] = (".git", ".hg", ".nox", ".tox", ".venv", "__pycache__")


class ConfigValidationError(ConfigurationError, LexcheckValidationError):
    """Raised when configuration data contains invalid values."""


class ConfigFieldChoiceError(ConfigValidationError):
    """Raised when a configuration field is provided with an unsupported value."""

    def __init__(self, field: str, allowed: tuple[str, ...]) -> None:
        """Initialize the exception with the field name and allowed values.

        Args:
            field: The name of the configuration field with an invalid value.
            allowed: Tuple of allowed values for this field.
        """
        self.field = field
        self.allowed = allowed
        allowed_text = ", ".join(sorted(allowed))
        super().__init__(f"{field} must be one of: {allowed_text}")


class UnsupportedConfigVersionError(ConfigValidationError):
    """Raised when a configuration file declares an unsupported schema version."""

    def __init__(self, provided: object, expected: int) -> None:
        """Initialize the exception with version information.

        Args:
            provided: The config_version value found in the configuration file.
            expected: The config_version value this version of lexcheck reads.
        """
        self.provided = provided
        self.expected = expected
        super().__init__(f"Unsupported config_version {provided}; expected {expected}")


class ConfigReadError(ConfigValidationError):
    """Raised when a configuration file cannot be read from disk."""

    def __init__(self, path: Path, error: Exception) -> None:
        self.path = path
        self.error = error
        super().__init__(f"Unable to read {path}: {error}")


class InvalidConfigFileError(ConfigValidationError):
    """Raised when a configuration file is not valid TOML or fails validation."""

    def __init__(self, path: Path, error: Exception) -> None:
        self.path = path
        self.error = error
        super().__init__(f"Invalid lexcheck configuration in {path}: {error}")


def _as_str_list(value: object) -> object:
    if isinstance(value, str):
        return [value]
    return value


class ConfigModel(BaseModel):
    """Pydantic model for the ``lexcheck`` configuration table.

    Attributes:
        config_version: Schema version number for the configuration file.
        python: Interpreter used for the syntax pre-check.
        syntax_check: Whether to run the syntax pre-check at all.
        rules: Names of the rules to run, in order. Empty runs every rule.
        rule_options: Option tables keyed by rule name. A ``severity`` key
            overrides the rule's default severity.
        extensions: File suffixes picked up when walking a directory.
        exclude: Glob patterns skipped when walking a directory.
        workers: Number of files analysed concurrently.
        fail_on: Which findings make the run fail.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")

    config_version: int = Field(default=CONFIG_VERSION)
    python: str | None = None
    syntax_check: bool = True
    rules: list[str] = Field(default_factory=list)
    rule_options: dict[str, dict[str, object]] = Field(default_factory=dict)
    extensions: list[str] = Field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    exclude: list[str] = Field(default_factory=lambda: list(DEFAULT_EXCLUDE))
    workers: int = Field(default=1, ge=1)
    fail_on: FailOnPolicy = FailOnPolicy.ERRORS

    @field_validator("rules", "extensions", "exclude", mode="before")
    @classmethod
    def _coerce_list(cls, value: object) -> object:
        return _as_str_list(value)

    @field_validator("python", mode="before")
    @classmethod
    def _strip_python(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip() or None
        return value

    @field_validator("fail_on", mode="before")
    @classmethod
    def _normalise_fail_on(cls, value: object) -> object:
        if isinstance(value, str):
            try:
                return FailOnPolicy.from_str(value)
            except ValueError as exc:
                msg = "fail_on"
                raise ConfigFieldChoiceError(msg, FAIL_ON_ALLOWED_VALUES) from exc
        return value

    @model_validator(mode="after")
    def _normalise(self) -> ConfigModel:
        self.rules = dedupe_preserve(name.strip() for name in self.rules if name.strip())
        self.extensions = dedupe_preserve(ext.strip() for ext in self.extensions if ext.strip())
        self.exclude = dedupe_preserve(pattern.strip() for pattern in self.exclude if pattern.strip())
        self.rule_options = {key.strip(): dict(value) for key, value in sorted(self.rule_options.items())}
        return self


def _default_rules() -> list[RuleName]:
    return []


def _default_rule_options() -> dict[RuleName, dict[str, object]]:
    return {}


@dataclass(slots=True)
class Config:
    """Runtime configuration for one lexcheck run.

    Attributes:
        python: Interpreter used for the syntax pre-check.
        syntax_check: Whether to run the syntax pre-check.
        rules: Names of the rules to run. Empty runs every registered rule.
        rule_options: Raw option tables keyed by rule name.
        extensions: File suffixes picked up when walking a directory.
        exclude: Glob patterns skipped when walking a directory.
        workers: Number of files analysed concurrently.
        fail_on: Which findings make the run fail.
        source: Configuration file the values were read from, if any.
    """

    python: str = field(default_factory=python_executable)
    syntax_check: bool = True
    rules: list[RuleName] = field(default_factory=_default_rules)
    rule_options: dict[RuleName, dict[str, object]] = field(default_factory=_default_rule_options)
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    exclude: tuple[str, ...] = DEFAULT_EXCLUDE
    workers: int = 1
    fail_on: FailOnPolicy = FailOnPolicy.ERRORS
    source: Path | None = None


def model_to_config(model: ConfigModel, *, source: Path | None = None) -> Config:
    """Convert a validated ``ConfigModel`` into the runtime ``Config``."""
    return Config(
        python=model.python or python_executable(),
        syntax_check=model.syntax_check,
        rules=[RuleName(name) for name in model.rules],
        rule_options={RuleName(key): cast("dict[str, object]", value) for key, value in model.rule_options.items()},
        extensions=tuple(model.extensions),
        exclude=tuple(model.exclude),
        workers=model.workers,
        fail_on=model.fail_on,
        source=source,
    )


__all__ = [
    "CONFIG_VERSION",
    "DEFAULT_EXCLUDE",
    "Config",
    "ConfigFieldChoiceError",
    "ConfigModel",
    "ConfigReadError",
    "ConfigValidationError",
    "InvalidConfigFileError",
    "UnsupportedConfigVersionError",
    "model_to_config",
]

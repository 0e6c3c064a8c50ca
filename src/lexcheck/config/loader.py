# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Locate and load lexcheck configuration files."""

from __future__ import annotations

import logging
import tomllib as toml
from pathlib import Path
from typing import Final, cast

from pydantic import ValidationError

from lexcheck._internal.logging_utils import structured_extra
from lexcheck.core.model_types import LogComponent

from .models import (
    CONFIG_VERSION,
    Config,
    ConfigModel,
    ConfigReadError,
    InvalidConfigFileError,
    UnsupportedConfigVersionError,
    model_to_config,
)

logger: logging.Logger = logging.getLogger("lexcheck.config")

CONFIG_FILENAMES: Final[tuple[str, ...]] = ("lexcheck.toml", ".lexcheck.toml", "pyproject.toml")
PYPROJECT_FILENAME: Final[str] = "pyproject.toml"


def _read_table(path: Path) -> dict[str, object]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigReadError(path, exc) from exc
    try:
        return toml.loads(text)
    except toml.TOMLDecodeError as exc:
        raise InvalidConfigFileError(path, exc) from exc


def _tool_section(raw_map: dict[str, object]) -> dict[str, object] | None:
    tool_obj = raw_map.get("tool")
    if isinstance(tool_obj, dict):
        section = cast("dict[str, object]", tool_obj).get("lexcheck")
        if isinstance(section, dict):
            return cast("dict[str, object]", section)
    return None


def _config_table(path: Path) -> dict[str, object] | None:
    """Return the lexcheck table of ``path``, or ``None`` if it has none.

    Dedicated files may hold the settings at top level or under
    ``[tool.lexcheck]``; ``pyproject.toml`` only under ``[tool.lexcheck]``.
    """
    raw_map = _read_table(path)
    section = _tool_section(raw_map)
    if section is not None:
        return section
    if path.name == PYPROJECT_FILENAME:
        return None
    return raw_map


def parse_config(raw_map: dict[str, object], *, source: Path) -> Config:
    """Validate a raw configuration table.

    Raises:
        UnsupportedConfigVersionError: If ``config_version`` is not supported.
        InvalidConfigFileError: If any value fails validation.
    """
    version = raw_map.get("config_version", CONFIG_VERSION)
    if version != CONFIG_VERSION:
        raise UnsupportedConfigVersionError(version, CONFIG_VERSION)
    try:
        model = ConfigModel.model_validate(raw_map)
    except ValidationError as exc:
        raise InvalidConfigFileError(source, exc) from exc
    return model_to_config(model, source=source)


def load_config(explicit_path: Path | None = None, *, search_root: Path | None = None) -> Config:
    """Load lexcheck configuration from a TOML file or use defaults.

    The search order is:
    1. ``explicit_path`` when given (it must exist),
    2. otherwise ``lexcheck.toml``, ``.lexcheck.toml`` and ``pyproject.toml``
       in ``search_root`` (default: the current directory). A
       ``pyproject.toml`` without ``[tool.lexcheck]`` is skipped.

    Args:
        explicit_path: Optional explicit path to a configuration file.
        search_root: Directory searched when no explicit path is given.

    Returns:
        The loaded ``Config``, or defaults when no file applies.

    Raises:
        ConfigReadError: If the explicit file is missing or a file cannot be read.
        InvalidConfigFileError: If a file is not valid TOML or fails validation.
        UnsupportedConfigVersionError: If a file declares another schema version.
    """
    if explicit_path is not None:
        if not explicit_path.is_file():
            raise ConfigReadError(explicit_path, FileNotFoundError("no such file"))
        candidates = [explicit_path]
    else:
        root = search_root or Path.cwd()
        candidates = [root / name for name in CONFIG_FILENAMES]

    for candidate in candidates:
        if not candidate.is_file():
            continue
        table = _config_table(candidate)
        if table is None:
            continue
        config = parse_config(table, source=candidate)
        logger.debug(
            "Loaded configuration from %s",
            candidate,
            extra=structured_extra(LogComponent.CONFIG, path=candidate),
        )
        return config

    logger.debug("No configuration file found; using defaults", extra=structured_extra(LogComponent.CONFIG))
    return Config()


__all__ = ["CONFIG_FILENAMES", "load_config", "parse_config"]

# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Unit tests for configuration loading and validation."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import pytest

from lexcheck._internal.exceptions import ConfigurationError
from lexcheck.config import (
    Config,
    ConfigReadError,
    InvalidConfigFileError,
    UnsupportedConfigVersionError,
    load_config,
)
from lexcheck.core.model_types import FailOnPolicy

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

pytestmark = pytest.mark.unit


def test_defaults_when_no_file_exists(tmp_path: Path) -> None:
    config = load_config(search_root=tmp_path)

    assert config == Config()
    assert config.python == sys.executable
    assert config.syntax_check
    assert config.rules == []
    assert config.extensions == (".py",)
    assert "__pycache__" in config.exclude
    assert config.workers == 1
    assert config.fail_on is FailOnPolicy.ERRORS
    assert config.source is None


def test_dedicated_file_is_loaded(tmp_path: Path, write_source: Callable[[str, str], Path]) -> None:
    path = write_source(
        "lexcheck.toml",
        """
config_version = 0
python = "/usr/bin/python3"
rules = ["line-length", "tab-indentation", "line-length"]
workers = 4
fail_on = "Warnings"
exclude = "build"

[rule_options.line-length]
max_length = 120
severity = "error"
""",
    )

    config = load_config(search_root=tmp_path)

    assert config.source == path
    assert config.python == "/usr/bin/python3"
    assert config.rules == ["line-length", "tab-indentation"]
    assert config.rule_options == {"line-length": {"max_length": 120, "severity": "error"}}
    assert config.workers == 4
    assert config.fail_on is FailOnPolicy.WARNINGS
    assert config.exclude == ("build",)


def test_pyproject_tool_section_is_used(tmp_path: Path, write_source: Callable[[str, str], Path]) -> None:
    _ = write_source("pyproject.toml", '[project]\nname = "demo"\n\n[tool.lexcheck]\nsyntax_check = false\n')

    config = load_config(search_root=tmp_path)

    assert not config.syntax_check
    assert config.source == tmp_path / "pyproject.toml"


def test_pyproject_without_section_is_skipped(tmp_path: Path, write_source: Callable[[str, str], Path]) -> None:
    _ = write_source("pyproject.toml", '[project]\nname = "demo"\n')

    assert load_config(search_root=tmp_path).source is None


def test_dedicated_file_wins_over_pyproject(tmp_path: Path, write_source: Callable[[str, str], Path]) -> None:
    _ = write_source("pyproject.toml", "[tool.lexcheck]\nworkers = 2\n")
    _ = write_source(".lexcheck.toml", "workers = 3\n")

    assert load_config(search_root=tmp_path).workers == 3


def test_explicit_path_must_exist(tmp_path: Path) -> None:
    with pytest.raises(ConfigReadError):
        _ = load_config(tmp_path / "missing.toml")


def test_explicit_path_is_used(write_source: Callable[[str, str], Path]) -> None:
    path = write_source("custom/settings.toml", "[tool.lexcheck]\nrules = 'blank-lines'\n")

    assert load_config(path).rules == ["blank-lines"]


@pytest.mark.parametrize(
    "content",
    [
        "workers = 0\n",
        "fail_on = 'sometimes'\n",
        "unknown_key = true\n",
        "rules = [1, 2]\n",
        "this is not toml\n",
    ],
)
def test_invalid_files_raise(content: str, write_source: Callable[[str, str], Path]) -> None:
    path = write_source("lexcheck.toml", content)

    with pytest.raises(InvalidConfigFileError) as excinfo:
        _ = load_config(path)

    assert isinstance(excinfo.value, ConfigurationError)
    assert excinfo.value.path == path


def test_unsupported_version_raises(write_source: Callable[[str, str], Path]) -> None:
    path = write_source("lexcheck.toml", "config_version = 7\n")

    with pytest.raises(UnsupportedConfigVersionError) as excinfo:
        _ = load_config(path)

    assert excinfo.value.provided == 7
    assert excinfo.value.expected == 0

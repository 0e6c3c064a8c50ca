# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Unit tests for file discovery."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from lexcheck._internal.exceptions import ConfigurationError
from lexcheck.discovery import PathNotFoundError, discover_files

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

pytestmark = pytest.mark.unit


@pytest.fixture
def project(tmp_path: Path, write_source: Callable[[str, str], Path]) -> Path:
    for name in (
        "b.py",
        "a.py",
        "notes.txt",
        "pkg/z.py",
        "pkg/__init__.py",
        "pkg/__pycache__/cached.py",
        "build/generated.py",
        "stubs/types.pyi",
    ):
        _ = write_source(name, "x = 1\n")
    return tmp_path


def _relative(root: Path, paths: list[Path]) -> list[str]:
    return [path.relative_to(root).as_posix() for path in paths]


def test_directory_is_walked_in_stable_order(project: Path) -> None:
    files = discover_files(project, exclude=("__pycache__",))

    assert _relative(project, files) == ["a.py", "b.py", "build/generated.py", "pkg/__init__.py", "pkg/z.py"]


def test_exclude_globs_match_paths_and_components(project: Path) -> None:
    files = discover_files(project, exclude=("build", "pkg/z.py", "__pycache__"))

    assert _relative(project, files) == ["a.py", "b.py", "pkg/__init__.py"]


def test_extensions_are_normalised(project: Path) -> None:
    files = discover_files(project, extensions=("PYI",))

    assert _relative(project, files) == ["stubs/types.pyi"]


def test_single_file_is_returned_as_is(project: Path) -> None:
    target = project / "notes.txt"

    assert discover_files(target) == [target]


def test_missing_root_is_configuration_error(tmp_path: Path) -> None:
    with pytest.raises(PathNotFoundError) as excinfo:
        _ = discover_files(tmp_path / "absent")

    assert isinstance(excinfo.value, ConfigurationError)

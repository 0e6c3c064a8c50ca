# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Pytest entry point that wires shared fixtures and markers."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from lexcheck._internal.logging_utils import CHILD_LOGGERS, ROOT_LOGGER_NAME  # noqa: E402

if TYPE_CHECKING:
    from collections.abc import Callable, Generator


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with the custom markers used by the test suite."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line(
        "markers",
        "integration: Integration tests (slower, multiple components)",
    )
    config.addinivalue_line("markers", "property: Property-based tests")
    config.addinivalue_line("markers", "cli: CLI-related tests")
    config.addinivalue_line("markers", "engine: Engine-related tests")
    config.addinivalue_line("markers", "rules: Rule and registry tests")


@pytest.fixture
def write_source(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write ``text`` to ``tmp_path / name`` without newline translation."""

    def _write(name: str, text: str) -> Path:
        target = tmp_path / name
        target.parent.mkdir(parents=True, exist_ok=True)
        with target.open("w", encoding="utf-8", newline="") as handle:
            _ = handle.write(text)
        return target

    return _write


@pytest.fixture(autouse=True)
def reset_lexcheck_logging() -> Generator[None, None, None]:
    """Restore the ``lexcheck`` logger tree after a test configures it."""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    handlers = list(root.handlers)
    level = root.level
    propagate = root.propagate
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    root.propagate = propagate
    for child in CHILD_LOGGERS:
        logging.getLogger(child).setLevel(logging.NOTSET)

# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

from __future__ import annotations

import importlib
import json
import logging
from pathlib import Path
from typing import cast

import pytest

from lexcheck._internal.logging_utils import (
    CHILD_LOGGERS,
    LOG_FORMAT_ENV,
    LOG_LEVEL_ENV,
    configure_logging,
    structured_extra,
)
from lexcheck.core.model_types import LogComponent, LogFormat, SeverityLevel

pytestmark = pytest.mark.unit


def test_structured_extra_drops_empty_fields() -> None:
    extra = structured_extra(LogComponent.ENGINE, path=Path("pkg/mod.py"), rule="line-length", details={})

    assert extra == {"component": LogComponent.ENGINE, "path": str(Path("pkg/mod.py")), "rule": "line-length"}


def test_structured_extra_coerces_values() -> None:
    extra = structured_extra(
        LogComponent.ENGINE,
        duration_ms=3,
        exit_code=1,
        counts={SeverityLevel.ERROR: 2},
    )

    assert extra["duration_ms"] == pytest.approx(3.0)
    assert extra["exit_code"] == 1
    assert extra["counts"] == {SeverityLevel.ERROR: 2}


def test_json_logs_carry_structured_fields(capsys: pytest.CaptureFixture[str]) -> None:
    config = configure_logging(LogFormat.JSON, log_level="info")
    logger = logging.getLogger("lexcheck.engine")

    logger.info("Analysed %s", "mod.py", extra=structured_extra(LogComponent.ENGINE, path="mod.py", rule="r"))

    record = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
    assert config.format is LogFormat.JSON
    assert config.level == logging.INFO
    assert record["message"] == "Analysed mod.py"
    assert record["logger"] == "lexcheck.engine"
    assert record["component"] == "engine"
    assert record["path"] == "mod.py"
    assert record["rule"] == "r"


def test_text_logs_are_single_line(capsys: pytest.CaptureFixture[str]) -> None:
    _ = configure_logging("text", log_level="warning")

    logging.getLogger("lexcheck.config").info("hidden")
    logging.getLogger("lexcheck.config").warning("shown")

    assert capsys.readouterr().err == "[WARNING] shown\n"


def test_environment_fallbacks(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(LOG_FORMAT_ENV, "json")
    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")

    config = configure_logging()

    assert config.format is LogFormat.JSON
    assert config.level == logging.DEBUG
    assert config.level_name == "debug"
    assert logging.getLogger("lexcheck.tokenizer").level == logging.DEBUG


def test_defaults_without_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(LOG_FORMAT_ENV, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)

    config = configure_logging()

    assert config.format is LogFormat.TEXT
    assert config.level == logging.WARNING
    assert logging.getLogger("lexcheck").propagate is False


def test_unknown_log_format_is_rejected() -> None:
    with pytest.raises(ValueError, match="xml"):
        _ = configure_logging("xml")


def test_child_loggers_are_the_module_loggers() -> None:
    modules = (
        "lexcheck.cli.app",
        "lexcheck.config.loader",
        "lexcheck.engine",
        "lexcheck.rules.registry",
        "lexcheck.syntax",
        "lexcheck.tokens.tokenizer",
        "lexcheck._internal.utils.process",
    )

    names = {cast("logging.Logger", importlib.import_module(module).logger).name for module in modules}

    assert names == set(CHILD_LOGGERS)

# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Argument parser helpers."""

from __future__ import annotations

import argparse
from typing import Any, Protocol

from lexcheck._internal.utils import consume


class ArgumentRegistrar(Protocol):
    def add_argument(self, *args: Any, **kwargs: Any) -> argparse.Action: ...  # pragma: no cover - stub


def register_argument(
    registrar: ArgumentRegistrar,
    *args: Any,
    **kwargs: Any,
) -> None:
    """Register an argument on a parser/argument group, discarding the action handle."""
    consume(registrar.add_argument(*args, **kwargs))


def positive_int(raw: str) -> int:
    """``argparse`` type accepting integers greater than zero."""
    try:
        value = int(raw)
    except ValueError as exc:
        message = f"invalid integer: {raw!r}"
        raise argparse.ArgumentTypeError(message) from exc
    if value < 1:
        message = f"must be at least 1, got {value}"
        raise argparse.ArgumentTypeError(message)
    return value


__all__ = ["ArgumentRegistrar", "positive_int", "register_argument"]

# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""IO helpers for CLI output."""

from __future__ import annotations

import sys
from typing import Protocol

from lexcheck._internal.utils import consume


class _TextStream(Protocol):
    def write(self, s: str, /) -> int: ...

    def flush(self) -> None: ...


def _select_stream(*, err: bool = False) -> _TextStream:
    return sys.stderr if err else sys.stdout


def echo(message: str, *, newline: bool = True, err: bool = False) -> None:
    """Write a message to stdout/stderr.

    Partial lines are flushed immediately so progress glyphs show up while
    the run is still going.
    """
    stream = _select_stream(err=err)
    consume(stream.write(message))
    if newline:
        consume(stream.write("\n"))
    else:
        stream.flush()


__all__ = ["echo"]

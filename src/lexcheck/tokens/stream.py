# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Rewindable token sequence shared by all rules checking one file."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, overload, override

from .token import Token

if TYPE_CHECKING:
    from pathlib import Path


class TokenStream(Sequence[Token]):
    """Immutable token sequence with a single read cursor.

    The tokens never change once the stream is built. Rules either walk the
    cursor (``rewind``/``read``/``peek``) or use plain sequence access; the
    engine rewinds the cursor before handing the stream to each rule. The
    cursor is not safe for concurrent use, so a stream belongs to one worker.
    """

    __slots__ = ("_path", "_position", "_tokens")

    def __init__(self, path: Path, tokens: Iterable[Token] = ()) -> None:
        self._path = path
        self._tokens: tuple[Token, ...] = tuple(tokens)
        self._position = 0

    @property
    def path(self) -> Path:
        return self._path

    @property
    def position(self) -> int:
        return self._position

    @property
    def at_end(self) -> bool:
        return self._position >= len(self._tokens)

    @property
    def text(self) -> str:
        """The source text rebuilt from every token, in order."""
        return "".join(token.text for token in self._tokens)

    def rewind(self) -> None:
        self._position = 0

    def read(self) -> Token | None:
        """Return the token under the cursor and advance, or ``None`` at the end."""
        if self.at_end:
            return None
        current = self._tokens[self._position]
        self._position += 1
        return current

    def peek(self, offset: int = 0) -> Token | None:
        index = self._position + offset
        if 0 <= index < len(self._tokens):
            return self._tokens[index]
        return None

    def previous(self, token: Token) -> Token | None:
        index = token.index - 1
        return self._tokens[index] if index >= 0 else None

    def following(self, token: Token) -> Token | None:
        index = token.index + 1
        return self._tokens[index] if index < len(self._tokens) else None

    @override
    def __len__(self) -> int:
        return len(self._tokens)

    @overload
    def __getitem__(self, index: int) -> Token: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Token, ...]: ...

    @override
    def __getitem__(self, index: int | slice) -> Token | tuple[Token, ...]:
        return self._tokens[index]

    @override
    def __repr__(self) -> str:
        return f"TokenStream(path={self._path!s}, tokens={len(self._tokens)}, position={self._position})"


__all__ = ["TokenStream"]

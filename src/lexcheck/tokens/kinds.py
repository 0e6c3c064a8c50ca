# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Token kind table.

Kinds reuse the numeric types of the standard ``token`` module. Operators are
classified by their exact type (``LPAR``, ``RSQB``, ``LBRACE``...), so every
bracket flavour is distinguishable. The lexer has no dedicated types for a few
categories rules care about; those get synthetic kinds numbered above
``token.NT_OFFSET``.
"""

from __future__ import annotations

import keyword
import token
import tokenize
from functools import cache
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Mapping

WHITESPACE: Final[int] = token.NT_OFFSET + 1
CONTINUATION: Final[int] = token.NT_OFFSET + 2
KEYWORD: Final[int] = token.NT_OFFSET + 3
SOFT_KEYWORD: Final[int] = token.NT_OFFSET + 4

_SYNTHETIC_KINDS: Final[dict[int, str]] = {
    WHITESPACE: "WHITESPACE",
    CONTINUATION: "CONTINUATION",
    KEYWORD: "KEYWORD",
    SOFT_KEYWORD: "SOFT_KEYWORD",
}


@cache
def token_names() -> Mapping[int, str]:
    """Return the process-wide, read-only kind-to-name table.

    Built on first use and never mutated afterwards.
    """
    names: dict[int, str] = dict(token.tok_name)
    names.update(_SYNTHETIC_KINDS)
    return MappingProxyType(names)


def token_name(kind: int) -> str:
    return token_names().get(kind, f"UNKNOWN({kind})")


def kind_for(info: tokenize.TokenInfo) -> int:
    """Map a lexer token onto a lexcheck kind."""
    if info.type == tokenize.NAME:
        if keyword.iskeyword(info.string):
            return KEYWORD
        if keyword.issoftkeyword(info.string):
            return SOFT_KEYWORD
        return tokenize.NAME
    if info.type == tokenize.OP:
        return info.exact_type
    if info.type == tokenize.NL:
        return WHITESPACE
    return info.type


def gap_kind(text: str) -> int:
    """Classify source text the lexer skipped between two tokens."""
    if text.isspace():
        return WHITESPACE
    if text.replace("\\", "").isspace():
        return CONTINUATION
    return token.ERRORTOKEN


def is_whitespace(kind: int) -> bool:
    return kind == WHITESPACE


__all__ = [
    "CONTINUATION",
    "KEYWORD",
    "SOFT_KEYWORD",
    "WHITESPACE",
    "gap_kind",
    "is_whitespace",
    "kind_for",
    "token_name",
    "token_names",
]

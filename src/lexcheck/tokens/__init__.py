# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Tokenization layer: token values, the kind table, and the tokenizer."""

from __future__ import annotations

from .kinds import CONTINUATION, KEYWORD, SOFT_KEYWORD, WHITESPACE, token_name, token_names
from .stream import TokenStream
from .token import Token
from .tokenizer import TokenizeError, tokenize_source

__all__ = [
    "CONTINUATION",
    "KEYWORD",
    "SOFT_KEYWORD",
    "WHITESPACE",
    "Token",
    "TokenStream",
    "TokenizeError",
    "token_name",
    "token_names",
    "tokenize_source",
]

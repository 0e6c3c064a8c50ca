# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Rules shipped with lexcheck."""

from __future__ import annotations

from .blank_lines import BlankLinesOptions, BlankLinesRule
from .line_length import LineLengthOptions, LineLengthRule
from .whitespace import TabIndentationRule, TrailingWhitespaceRule

__all__ = [
    "BlankLinesOptions",
    "BlankLinesRule",
    "LineLengthOptions",
    "LineLengthRule",
    "TabIndentationRule",
    "TrailingWhitespaceRule",
]

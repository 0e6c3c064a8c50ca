# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Shared helpers for the lexcheck CLI."""

from __future__ import annotations

from .args import positive_int, register_argument
from .io import echo

__all__ = ["echo", "positive_int", "register_argument"]

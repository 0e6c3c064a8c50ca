# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

from __future__ import annotations

from typing import NewType

RuleName = NewType("RuleName", str)

__all__ = ["RuleName"]

# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

from __future__ import annotations

from collections.abc import Hashable, Iterable


def consume(value: object | None) -> None:
    """Explicitly mark a value as intentionally unused."""
    _ = value


def dedupe_preserve[T: Hashable](values: Iterable[T]) -> list[T]:
    """Return items in order, dropping subsequent duplicates.

    Args:
        values: Iterable of hashable items whose first occurrence should be
            preserved.

    Returns:
        A list containing the first appearance of each unique value, ordered by
        the original traversal.
    """
    seen: set[T] = set()
    result: list[T] = []
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        result.append(value)
    return result


__all__ = ["consume", "dedupe_preserve"]

# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Canonical JSON types and helpers used across lexcheck.

This module has no dependencies on logging, configuration, or CLI layers so
that every other layer can import it.
"""

from __future__ import annotations

import json
from enum import Enum
from pathlib import PurePath
from typing import cast

__all__ = [
    "JSONList",
    "JSONMapping",
    "JSONValue",
    "dumps",
    "normalise_enums_for_json",
]

type JSONValue = str | int | float | bool | dict[str, JSONValue] | list[JSONValue] | None
type JSONMapping = dict[str, JSONValue]
type JSONList = list[JSONValue]


def normalise_enums_for_json(value: object) -> JSONValue:
    """Recursively convert Enum keys/values and paths to JSON-compatible payloads.

    Args:
        value: Arbitrary Python object hierarchy that may include ``Enum``
            instances, paths, mappings, or sequences.

    Returns:
        A JSON-compatible structure with enum keys and values replaced by
        their ``.value`` payloads and paths rendered in POSIX form.
    """

    def _convert(obj: object) -> JSONValue:
        if isinstance(obj, Enum):
            return cast("JSONValue", obj.value)
        if isinstance(obj, PurePath):
            return obj.as_posix()
        if isinstance(obj, dict):
            mapping_obj = cast("dict[object, object]", obj)
            result: dict[str, JSONValue] = {}
            for key, raw_val in mapping_obj.items():
                if isinstance(key, Enum):
                    norm_key: str = str(key.value)
                elif isinstance(key, PurePath):
                    norm_key = key.as_posix()
                else:
                    norm_key = str(key)
                result[norm_key] = _convert(raw_val)
            return cast("JSONValue", result)
        if isinstance(obj, list | tuple):
            seq_obj = cast("list[object] | tuple[object, ...]", obj)
            return cast("JSONValue", [_convert(item) for item in seq_obj])
        if isinstance(obj, (str, int, float, bool)) or obj is None:
            return cast("JSONValue", obj)
        return cast("JSONValue", str(obj))

    return _convert(value)


def dumps(value: object, *, indent: int | None = 2) -> str:
    """Serialise ``value`` after normalising enums and paths."""
    return json.dumps(normalise_enums_for_json(value), indent=indent, ensure_ascii=False)

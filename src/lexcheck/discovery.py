# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Find the files to analyse under a root path."""

from __future__ import annotations

import fnmatch
import os
from pathlib import Path
from typing import TYPE_CHECKING, Final

from lexcheck._internal.exceptions import ConfigurationError
from lexcheck._internal.utils import dedupe_preserve

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

DEFAULT_EXTENSIONS: Final[tuple[str, ...]] = (".py",)


class PathNotFoundError(ConfigurationError):
    """Raised when the analysis root does not exist."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Path '{path}' does not exist")


def _normalise_extension(extension: str) -> str:
    value = extension.strip().lower()
    return value if value.startswith(".") else f".{value}"


def _is_excluded(relative: Path, patterns: Sequence[str]) -> bool:
    posix = relative.as_posix()
    for pattern in patterns:
        if fnmatch.fnmatchcase(posix, pattern):
            return True
        if any(fnmatch.fnmatchcase(part, pattern) for part in relative.parts):
            return True
    return False


def _walk(root: Path, patterns: Sequence[str]) -> Iterator[Path]:
    for directory, subdirectories, filenames in os.walk(root):
        current = Path(directory)
        # Prune in place so excluded trees are never entered.
        subdirectories[:] = sorted(
            name for name in subdirectories if not _is_excluded((current / name).relative_to(root), patterns)
        )
        for filename in sorted(filenames):
            candidate = current / filename
            if not _is_excluded(candidate.relative_to(root), patterns):
                yield candidate


def discover_files(
    root: Path,
    *,
    extensions: Sequence[str] = DEFAULT_EXTENSIONS,
    exclude: Sequence[str] = (),
) -> list[Path]:
    """Return the files to analyse, in a stable order.

    A file given directly is returned as-is, whatever its extension. A
    directory is walked recursively; files are kept when their suffix is one
    of ``extensions`` and neither their relative path nor any of its
    components matches an ``exclude`` glob.

    Raises:
        PathNotFoundError: If ``root`` does not exist.
    """
    if not root.exists():
        raise PathNotFoundError(root)
    if root.is_file():
        return [root]
    wanted = {_normalise_extension(extension) for extension in extensions}
    return dedupe_preserve(path for path in _walk(root, exclude) if path.suffix.lower() in wanted)


__all__ = ["DEFAULT_EXTENSIONS", "PathNotFoundError", "discover_files"]

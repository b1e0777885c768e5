# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Recursive directory expansion with conventional pruning rules."""

from __future__ import annotations

import os
from collections.abc import Callable, Collection, Iterator

from ..constants import ALWAYS_EXCLUDE_DIRS, EGG_INFO_SUFFIX

BuildablePredicate = Callable[[str], bool]


def should_skip_directory(name: str, excludes: Collection[str] = ()) -> bool:
    """Return whether a directory called ``name`` should be pruned.

    Args:
        name: Final path component of the directory.
        excludes: Extra directory names configured by the user.

    Returns:
        bool: ``True`` for hidden, tooling, packaging, or excluded directories.
    """

    if name.startswith("."):
        return True
    if name in ALWAYS_EXCLUDE_DIRS or name in excludes:
        return True
    return name.endswith(EGG_INFO_SUFFIX)


def iter_directories(root: str, *, excludes: Collection[str] = ()) -> Iterator[str]:
    """Yield ``root`` and every non-pruned directory beneath it.

    Directories are visited top-down in name order. Sub-paths that cannot be
    listed are skipped and traversal continues.

    Args:
        root: Directory at which traversal starts; never pruned itself.
        excludes: Extra directory names pruned during the walk.

    Yields:
        str: Normalised directory paths spelled relative to ``root``.
    """

    for dirpath, dirnames, _filenames in os.walk(root, onerror=_ignore_walk_error):
        dirnames[:] = sorted(name for name in dirnames if not should_skip_directory(name, excludes))
        yield os.path.normpath(dirpath)


def expand_directory(
    root: str,
    *,
    is_buildable: BuildablePredicate,
    excludes: Collection[str] = (),
) -> list[str]:
    """Return the buildable directories under ``root`` including ``root``.

    Args:
        root: Directory whose subtree should be expanded.
        is_buildable: Predicate deciding whether a directory forms a unit.
        excludes: Extra directory names pruned during the walk.

    Returns:
        list[str]: Ordered, de-duplicated directory paths.
    """

    seen: dict[str, None] = {}
    for directory in iter_directories(root, excludes=excludes):
        if directory in seen:
            continue
        if is_buildable(directory):
            seen[directory] = None
    return list(seen)


def _ignore_walk_error(_error: OSError) -> None:
    """Swallow errors raised while listing a sub-directory."""


__all__ = ["BuildablePredicate", "expand_directory", "iter_directories", "should_skip_directory"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Classify command-line targets and decide the run kind up front."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from ..constants import RECURSIVE_MARKER


class TargetKind(str, Enum):
    """Enumerate the mutually exclusive kinds of command-line target."""

    DIRECTORY = "directory"
    FILE = "file"
    PACKAGE = "package"


class RunKind(str, Enum):
    """Enumerate the run modes; exactly one applies to an invocation."""

    DIRECTORIES = "directories"
    FILES = "files"
    PACKAGES = "packages"


_RUN_KIND_BY_TARGET: dict[TargetKind, RunKind] = {
    TargetKind.DIRECTORY: RunKind.DIRECTORIES,
    TargetKind.FILE: RunKind.FILES,
    TargetKind.PACKAGE: RunKind.PACKAGES,
}


class TargetUsageError(ValueError):
    """Raised when the supplied targets cannot form a single run."""


class NoTargetsError(TargetUsageError):
    """Raised when no targets were supplied to :func:`plan_targets`."""


class MixedTargetsError(TargetUsageError):
    """Raised when targets of more than one kind are combined."""

    def __init__(self, kinds: Sequence[TargetKind]) -> None:
        self.kinds = tuple(kinds)
        names = ", ".join(kind.value for kind in self.kinds)
        super().__init__(f"cannot mix target kinds ({names}); pass only directories, only files, or only packages")


@dataclass(frozen=True, slots=True)
class Target:
    """Single classified command-line argument.

    Attributes:
        raw: Argument exactly as supplied by the user.
        kind: Resolved target kind.
        recursive: ``True`` when a directory target carried the ``/...`` marker.
        path: Argument with the recursive marker stripped.
    """

    raw: str
    kind: TargetKind
    recursive: bool = False

    @property
    def path(self) -> str:
        if self.recursive:
            return strip_recursive_marker(self.raw)
        return self.raw


@dataclass(frozen=True, slots=True)
class RunPlan:
    """Targets that all share one run kind."""

    kind: RunKind
    targets: tuple[Target, ...]

    @property
    def arguments(self) -> tuple[str, ...]:
        """Return the raw arguments in the order they were supplied."""

        return tuple(target.raw for target in self.targets)


def has_recursive_marker(arg: str) -> bool:
    """Return whether ``arg`` ends with the recursive expansion marker."""

    return arg.endswith(RECURSIVE_MARKER)


def strip_recursive_marker(arg: str) -> str:
    """Return ``arg`` without a trailing recursive marker.

    A bare ``/...`` strips to the empty string, which names no directory.

    Args:
        arg: Command-line argument possibly carrying the marker.

    Returns:
        str: Argument prefix preceding the marker.
    """

    if not has_recursive_marker(arg):
        return arg
    return arg[: -len(RECURSIVE_MARKER)]


def classify_target(arg: str) -> Target:
    """Classify ``arg`` as a directory, file, or package target.

    Args:
        arg: Raw command-line argument.

    Returns:
        Target: Immutable classification of ``arg``.
    """

    if has_recursive_marker(arg) and os.path.isdir(strip_recursive_marker(arg)):
        return Target(raw=arg, kind=TargetKind.DIRECTORY, recursive=True)
    if os.path.isdir(arg):
        return Target(raw=arg, kind=TargetKind.DIRECTORY)
    if os.path.exists(arg):
        return Target(raw=arg, kind=TargetKind.FILE)
    return Target(raw=arg, kind=TargetKind.PACKAGE)


def plan_targets(args: Sequence[str]) -> RunPlan:
    """Classify ``args`` and enforce that exactly one target kind is present.

    Args:
        args: Raw command-line arguments.

    Returns:
        RunPlan: Plan carrying the single run kind and classified targets.

    Raises:
        NoTargetsError: If ``args`` is empty.
        MixedTargetsError: If more than one target kind is present.
    """

    if not args:
        raise NoTargetsError("no targets supplied")
    targets = tuple(classify_target(arg) for arg in args)
    kinds = tuple(dict.fromkeys(target.kind for target in targets))
    if len(kinds) != 1:
        raise MixedTargetsError(kinds)
    return RunPlan(kind=_RUN_KIND_BY_TARGET[kinds[0]], targets=targets)


__all__ = [
    "MixedTargetsError",
    "NoTargetsError",
    "RunKind",
    "RunPlan",
    "Target",
    "TargetKind",
    "TargetUsageError",
    "classify_target",
    "has_recursive_marker",
    "plan_targets",
    "strip_recursive_marker",
]

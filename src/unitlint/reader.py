# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Load raw source bytes for a compilation unit."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True, slots=True)
class ReadFailure:
    """File that could not be read together with the underlying error."""

    path: str
    error: OSError

    def describe(self) -> str:
        reason = self.error.strerror or str(self.error)
        return f"open {self.path}: {reason}"


@dataclass(slots=True)
class ReadResult:
    """Sources that were read successfully plus the files that were dropped."""

    sources: dict[str, bytes] = field(default_factory=dict)
    failures: list[ReadFailure] = field(default_factory=list)


def read_sources(paths: Iterable[str]) -> ReadResult:
    """Read every path in ``paths`` without aborting on individual failures.

    Args:
        paths: File paths forming one compilation unit.

    Returns:
        ReadResult: Mapping of path to raw bytes in input order, plus one
        :class:`ReadFailure` per unreadable file.
    """

    result = ReadResult()
    for path in paths:
        if path in result.sources:
            continue
        try:
            result.sources[path] = Path(path).read_bytes()
        except OSError as exc:
            result.failures.append(ReadFailure(path=path, error=exc))
    return result


__all__ = ["ReadFailure", "ReadResult", "read_sources"]

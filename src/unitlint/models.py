# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Data models shared across target resolution, analysis, and reporting."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from threading import Lock

from pydantic import BaseModel, ConfigDict, Field


class Position(BaseModel):
    """Location of a finding inside a source file."""

    model_config = ConfigDict(frozen=True)

    file: str
    line: int = Field(default=0, ge=0)
    column: int = Field(default=0, ge=0)

    def __str__(self) -> str:
        """Render the position as ``file:line:column``.

        A zero column is omitted, and a zero line drops both numbers.

        Returns:
            str: Human-readable position prefix used in lint output.
        """

        if self.line <= 0:
            return self.file
        if self.column <= 0:
            return f"{self.file}:{self.line}"
        return f"{self.file}:{self.line}:{self.column}"


class Finding(BaseModel):
    """Single issue emitted by an analysis engine."""

    model_config = ConfigDict(frozen=True)

    position: Position
    text: str
    confidence: float = Field(ge=0.0, le=1.0)
    category: str | None = None
    link: str | None = None

    def render(self) -> str:
        """Return the ``position: text`` line printed for this finding.

        Returns:
            str: Formatted finding line.
        """

        return f"{self.position}: {self.text}"


@dataclass(frozen=True, slots=True)
class CompilationUnit:
    """Ordered set of unique file paths handed to one engine invocation."""

    label: str
    paths: tuple[str, ...]

    @classmethod
    def from_paths(cls, label: str, paths: Iterable[str]) -> CompilationUnit:
        """Build a unit from ``paths`` dropping duplicates while keeping order.

        Args:
            label: Human-readable identifier for log output.
            paths: Candidate file paths, possibly containing duplicates.

        Returns:
            CompilationUnit: Unit with unique paths in first-seen order.
        """

        return cls(label=label, paths=tuple(dict.fromkeys(paths)))

    def __len__(self) -> int:
        return len(self.paths)


@dataclass(slots=True)
class LintTally:
    """Accumulate the number of findings printed during a run."""

    suggestions: int = 0
    units: int = 0
    _lock: Lock = field(default_factory=Lock, repr=False, compare=False)

    def record_finding(self) -> None:
        """Count one printed finding."""

        with self._lock:
            self.suggestions += 1

    def record_unit(self) -> None:
        """Count one compilation unit handed to the engine."""

        with self._lock:
            self.units += 1


__all__ = ["CompilationUnit", "Finding", "LintTally", "Position"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Contract between the front end and pluggable analysis engines."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Protocol, runtime_checkable

from ..models import Finding
from .rules import RuleSelection


class AnalyzerError(Exception):
    """Raised by an engine when a compilation unit cannot be analysed."""


@runtime_checkable
class Analyzer(Protocol):
    """Engine that turns a unit's sources into findings.

    Implementations receive every file of one unit at once so they can
    perform cross-file checks, and must signal unusable input by raising
    :class:`AnalyzerError` rather than letting arbitrary exceptions escape.
    """

    name: str

    def lint_files(self, files: Mapping[str, bytes], rules: RuleSelection) -> Sequence[Finding]:
        """Return findings for ``files`` in a deterministic order.

        Args:
            files: Mapping of file path to raw file content.
            rules: Enabled rule categories.

        Returns:
            Sequence[Finding]: Findings ordered as they should be reported.

        Raises:
            AnalyzerError: If the unit cannot be analysed.
        """

        raise NotImplementedError


__all__ = ["Analyzer", "AnalyzerError"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Built-in engine that only checks that every file of a unit parses."""

from __future__ import annotations

import ast
import warnings
from collections.abc import Mapping, Sequence

from ..models import Finding
from .interfaces import AnalyzerError
from .rules import RuleSelection


class SyntaxAnalyzer:
    """Validate that a unit parses; never emits findings of its own."""

    name = "syntax"

    def lint_files(self, files: Mapping[str, bytes], rules: RuleSelection) -> Sequence[Finding]:
        """Parse each file and raise when any of them is not valid Python.

        Args:
            files: Mapping of file path to raw file content.
            rules: Enabled rule categories; unused by this engine.

        Returns:
            Sequence[Finding]: Always empty.

        Raises:
            AnalyzerError: If one or more files fail to parse.
        """

        del rules
        problems = [problem for path, source in files.items() if (problem := _parse_problem(path, source))]
        if problems:
            raise AnalyzerError("; ".join(problems))
        return []


def _parse_problem(path: str, source: bytes) -> str | None:
    """Return a ``path:line:col: message`` description when ``source`` fails to parse."""

    try:
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", SyntaxWarning)
            ast.parse(source, filename=path)
    except SyntaxError as exc:
        line = exc.lineno or 0
        column = exc.offset or 0
        return f"{path}:{line}:{column}: {exc.msg}"
    except ValueError as exc:
        return f"{path}: {exc}"
    return None


__all__ = ["SyntaxAnalyzer"]

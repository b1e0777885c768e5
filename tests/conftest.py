# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

import pytest

from unitlint.analysis import AnalyzerError, RuleSelection
from unitlint.cli.shared import CLILogger, build_cli_logger
from unitlint.models import Finding, Position


class FakeAnalyzer:
    """In-memory engine returning canned findings for the files it receives."""

    name = "fake"

    def __init__(self) -> None:
        self.findings: list[Finding] = []
        self.error: str | None = None
        self.calls: list[tuple[str, ...]] = []
        self.rules: list[RuleSelection] = []

    def add(self, file: str, confidence: float, text: str = "problem", *, line: int = 1, column: int = 0) -> None:
        position = Position(file=file, line=line, column=column)
        self.findings.append(Finding(position=position, text=text, confidence=confidence))

    def lint_files(self, files: Mapping[str, bytes], rules: RuleSelection) -> Sequence[Finding]:
        self.calls.append(tuple(files))
        self.rules.append(rules)
        if self.error is not None:
            raise AnalyzerError(self.error)
        return [finding for finding in self.findings if finding.position.file in files]


@pytest.fixture
def fake_analyzer() -> FakeAnalyzer:
    """Return a fresh fake engine for each test."""
    return FakeAnalyzer()


@pytest.fixture
def logger() -> CLILogger:
    """Return a plain logger without colour or emoji."""
    return build_cli_logger(emoji=False, no_color=True)

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for finding, position, unit, and tally models."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest
from pydantic import ValidationError

from unitlint.models import CompilationUnit, Finding, LintTally, Position


def test_position_rendering() -> None:
    assert str(Position(file="a.py", line=3, column=7)) == "a.py:3:7"
    assert str(Position(file="a.py", line=3)) == "a.py:3"
    assert str(Position(file="a.py")) == "a.py"


def test_finding_render_and_validation() -> None:
    finding = Finding(position=Position(file="a.py", line=2), text="exported name lacks a docstring", confidence=1)

    assert finding.render() == "a.py:2: exported name lacks a docstring"
    with pytest.raises(ValidationError):
        Finding(position=Position(file="a.py"), text="x", confidence=1.5)


def test_compilation_unit_deduplicates_paths() -> None:
    unit = CompilationUnit.from_paths("<files>", ["b.py", "a.py", "b.py"])

    assert unit.paths == ("b.py", "a.py")
    assert len(unit) == 2


def test_tally_counts_across_threads() -> None:
    tally = LintTally()

    with ThreadPoolExecutor(max_workers=4) as pool:
        for _ in range(200):
            pool.submit(tally.record_finding)

    assert tally.suggestions == 200
    assert tally.units == 0

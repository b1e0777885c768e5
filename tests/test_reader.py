# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the file reader."""

from __future__ import annotations

from pathlib import Path

from unitlint.reader import read_sources


def test_read_sources_keeps_order_and_reports_failures(tmp_path: Path) -> None:
    first = tmp_path / "b.py"
    second = tmp_path / "a.py"
    first.write_bytes(b"b = 1\n")
    second.write_bytes(b"a = 1\n")
    missing = tmp_path / "missing.py"

    result = read_sources([str(first), str(missing), str(second), str(first)])

    assert list(result.sources) == [str(first), str(second)]
    assert result.sources[str(second)] == b"a = 1\n"
    assert [failure.path for failure in result.failures] == [str(missing)]
    assert result.failures[0].describe() == f"open {missing}: No such file or directory"


def test_read_sources_reports_directories(tmp_path: Path) -> None:
    result = read_sources([str(tmp_path)])

    assert not result.sources
    assert len(result.failures) == 1

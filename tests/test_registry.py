# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for analyzer discovery and selection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import pytest

from unitlint.analysis import Analyzer, SyntaxAnalyzer, registry
from unitlint.analysis.registry import (
    ANALYZER_PLUGIN_GROUP,
    UnknownAnalyzerError,
    available_analyzers,
    create_analyzer,
    load_analyzer_plugins,
)


@dataclass
class _StubEntryPoint:
    name: str
    target: Any = None
    error: Exception | None = None

    def load(self) -> Any:
        if self.error is not None:
            raise self.error
        return self.target


class _PluginAnalyzer:
    name = "plugin"

    def lint_files(self, files, rules):
        return []


def _install_entry_points(monkeypatch: pytest.MonkeyPatch, entries: list[_StubEntryPoint]) -> None:
    monkeypatch.setattr(registry.metadata, "entry_points", lambda: {ANALYZER_PLUGIN_GROUP: entries})


def test_builtin_syntax_analyzer_is_default(monkeypatch: pytest.MonkeyPatch) -> None:
    _install_entry_points(monkeypatch, [])

    analyzer = create_analyzer("syntax")

    assert isinstance(analyzer, SyntaxAnalyzer)
    assert isinstance(analyzer, Analyzer)


def test_plugins_are_discovered(monkeypatch: pytest.MonkeyPatch) -> None:
    _install_entry_points(monkeypatch, [_StubEntryPoint("plugin", _PluginAnalyzer)])

    assert set(available_analyzers()) == {"syntax", "plugin"}
    assert isinstance(create_analyzer("plugin"), _PluginAnalyzer)


def test_broken_plugins_are_skipped(monkeypatch: pytest.MonkeyPatch) -> None:
    _install_entry_points(
        monkeypatch,
        [
            _StubEntryPoint("broken", error=ImportError("missing dependency")),
            _StubEntryPoint("plugin", _PluginAnalyzer),
        ],
    )
    skipped: list[tuple[str, str]] = []

    factories = load_analyzer_plugins(lambda name, exc: skipped.append((name, str(exc))))

    assert list(factories) == ["plugin"]
    assert skipped == [("broken", "missing dependency")]


def test_unknown_analyzer_lists_available() -> None:
    with pytest.raises(UnknownAnalyzerError) as excinfo:
        create_analyzer("nope", {"syntax": SyntaxAnalyzer})

    assert excinfo.value.available == ("syntax",)
    assert "unknown analyzer 'nope'" in str(excinfo.value)

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Analyzer registry backed by built-ins and entry-point plugins.

Third-party packages contribute engines by exposing a zero-argument factory
under the ``unitlint.analyzers`` entry-point group; the entry-point name is
the value accepted by ``--analyzer``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from importlib import metadata
from importlib.metadata import EntryPoint, EntryPoints
from typing import TypeAlias, cast

from .interfaces import Analyzer
from .syntax import SyntaxAnalyzer

ANALYZER_PLUGIN_GROUP = "unitlint.analyzers"

AnalyzerFactory: TypeAlias = Callable[[], Analyzer]
PluginErrorHandler: TypeAlias = Callable[[str, Exception], None]

_EntryPointSource: TypeAlias = EntryPoints | Mapping[str, Sequence[EntryPoint]]

BUILTIN_ANALYZERS: dict[str, AnalyzerFactory] = {
    SyntaxAnalyzer.name: SyntaxAnalyzer,
}


class UnknownAnalyzerError(LookupError):
    """Raised when the requested analyzer is neither built in nor installed."""

    def __init__(self, name: str, available: Iterable[str]) -> None:
        self.name = name
        self.available = tuple(sorted(available))
        super().__init__(f"unknown analyzer {name!r}; available: {', '.join(self.available)}")


def _select_entry_points(entries: _EntryPointSource, group: str) -> Iterable[EntryPoint]:
    """Return entry points exposed under ``group`` from ``entries``.

    Args:
        entries: Raw entry-point container returned by :func:`metadata.entry_points`.
        group: Name of the entry-point group to extract.

    Returns:
        Iterable[EntryPoint]: Entry points belonging to ``group``.
    """

    if isinstance(entries, Mapping):
        return entries.get(group, ())
    if hasattr(entries, "select"):
        return entries.select(group=group)
    return ()


def load_analyzer_plugins(on_error: PluginErrorHandler | None = None) -> dict[str, AnalyzerFactory]:
    """Return analyzer factories discovered via entry points.

    Entries that fail to import are skipped.

    Args:
        on_error: Optional callback receiving the entry name and the import
            error of every skipped entry.

    Returns:
        dict[str, AnalyzerFactory]: Factories keyed by entry-point name.
    """

    selected = _select_entry_points(cast(_EntryPointSource, metadata.entry_points()), ANALYZER_PLUGIN_GROUP)
    factories: dict[str, AnalyzerFactory] = {}
    for entry in selected:
        try:
            factory = cast(AnalyzerFactory, entry.load())
        except (AttributeError, ImportError, ValueError, RuntimeError) as exc:
            if on_error is not None:
                on_error(entry.name, exc)
            continue
        factories[entry.name] = factory
    return factories


def available_analyzers(on_error: PluginErrorHandler | None = None) -> dict[str, AnalyzerFactory]:
    """Return built-in factories overlaid with installed plugins."""

    return {**BUILTIN_ANALYZERS, **load_analyzer_plugins(on_error)}


def create_analyzer(
    name: str,
    factories: Mapping[str, AnalyzerFactory] | None = None,
    *,
    on_error: PluginErrorHandler | None = None,
) -> Analyzer:
    """Instantiate the analyzer registered as ``name``.

    Args:
        name: Registered analyzer name.
        factories: Optional explicit registry; defaults to :func:`available_analyzers`.
        on_error: Callback for plugins skipped while building the default registry.

    Returns:
        Analyzer: Fresh engine instance.

    Raises:
        UnknownAnalyzerError: If ``name`` is not registered.
    """

    registry = available_analyzers(on_error) if factories is None else factories
    try:
        factory = registry[name]
    except KeyError as exc:
        raise UnknownAnalyzerError(name, registry) from exc
    return factory()


__all__ = [
    "ANALYZER_PLUGIN_GROUP",
    "AnalyzerFactory",
    "BUILTIN_ANALYZERS",
    "PluginErrorHandler",
    "UnknownAnalyzerError",
    "available_analyzers",
    "create_analyzer",
    "load_analyzer_plugins",
]

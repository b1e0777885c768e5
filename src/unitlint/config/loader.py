# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Layered configuration loading from defaults, ``pyproject.toml``, and ``.unitlint.toml``."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol

from pydantic import ValidationError

from ..constants import PROJECT_CONFIG_NAME, PYPROJECT_NAME, PYPROJECT_SECTION
from .models import ConfigError, LintConfig

PYPROJECT_TOOL_KEY = "tool"


class ConfigSource(Protocol):
    """Source returning a raw configuration fragment."""

    name: str

    def load(self) -> Mapping[str, Any]:
        """Return the fragment, or an empty mapping when the source is absent."""

        raise NotImplementedError


class TomlConfigSource:
    """Load configuration data from a standalone TOML document."""

    def __init__(self, path: Path, *, name: str | None = None, required: bool = False) -> None:
        self.path = path
        self.name = name or str(path)
        self._required = required

    def load(self) -> Mapping[str, Any]:
        if not self.path.exists():
            if self._required:
                raise ConfigError(f"Configuration file {self.path} does not exist")
            return {}
        try:
            with self.path.open("rb") as handle:
                return tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML in {self.path}: {exc}") from exc
        except OSError as exc:
            raise ConfigError(f"Cannot read {self.path}: {exc.strerror or exc}") from exc


class PyProjectConfigSource(TomlConfigSource):
    """Read configuration from ``[tool.unitlint]`` within ``pyproject.toml``."""

    def load(self) -> Mapping[str, Any]:
        data = super().load()
        tool_section = data.get(PYPROJECT_TOOL_KEY)
        if not isinstance(tool_section, Mapping):
            return {}
        section = tool_section.get(PYPROJECT_SECTION)
        if section is None:
            return {}
        if not isinstance(section, Mapping):
            raise ConfigError(f"[{PYPROJECT_TOOL_KEY}.{PYPROJECT_SECTION}] in {self.path} must be a table")
        return section


@dataclass(slots=True)
class ConfigLoadResult:
    """Resolved configuration plus the names of the sources that contributed."""

    config: LintConfig
    applied_sources: list[str] = field(default_factory=list)


class ConfigLoader:
    """Merge configuration sources where later sources win."""

    def __init__(self, sources: Sequence[ConfigSource]) -> None:
        self._sources = list(sources)

    @classmethod
    def for_root(cls, project_root: Path, *, project_config: Path | None = None) -> ConfigLoader:
        """Build a loader for ``project_root`` honouring the default precedence.

        Args:
            project_root: Directory searched for ``pyproject.toml`` and
                ``.unitlint.toml``.
            project_config: Explicit configuration file replacing
                ``.unitlint.toml``; it must exist.

        Returns:
            ConfigLoader: Loader ordered defaults < pyproject < project file.
        """

        sources: list[ConfigSource] = [PyProjectConfigSource(project_root / PYPROJECT_NAME)]
        if project_config is not None:
            sources.append(TomlConfigSource(project_config, required=True))
        else:
            sources.append(TomlConfigSource(project_root / PROJECT_CONFIG_NAME))
        return cls(sources)

    def load(self) -> LintConfig:
        return self.load_with_trace().config

    def load_with_trace(self) -> ConfigLoadResult:
        """Return the merged configuration together with contributing sources.

        Raises:
            ConfigError: If a source is unreadable or the merged data is invalid.
        """

        merged: dict[str, Any] = {}
        applied: list[str] = []
        for source in self._sources:
            fragment = source.load()
            if not fragment:
                continue
            merged = _deep_merge(merged, _normalise_keys(fragment))
            applied.append(source.name)
        try:
            config = LintConfig.model_validate(merged)
        except ValidationError as exc:
            raise ConfigError(_format_validation_error(exc)) from exc
        return ConfigLoadResult(config=config, applied_sources=applied)


def load_config(project_root: Path, *, project_config: Path | None = None) -> LintConfig:
    """Return the configuration for ``project_root``."""

    return ConfigLoader.for_root(project_root, project_config=project_config).load()


def _normalise_keys(fragment: Mapping[str, Any]) -> dict[str, Any]:
    """Return ``fragment`` with kebab-case keys rewritten to snake_case."""

    normalised: dict[str, Any] = {}
    for key, value in fragment.items():
        clean_key = str(key).replace("-", "_")
        normalised[clean_key] = _normalise_keys(value) if isinstance(value, Mapping) else value
    return normalised


def _deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Return a new mapping with ``override`` merged recursively into ``base``."""

    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = _deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def _format_validation_error(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error["loc"]) or "<root>"
        parts.append(f"{location}: {error['msg']}")
    return "Invalid configuration: " + "; ".join(parts)


__all__ = [
    "ConfigLoadResult",
    "ConfigLoader",
    "ConfigSource",
    "PyProjectConfigSource",
    "TomlConfigSource",
    "load_config",
]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for layered configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from unitlint.analysis import RuleCategory, RuleSelection
from unitlint.config import ConfigError, ConfigLoader, LintConfig, load_config


def test_defaults_without_files(tmp_path: Path) -> None:
    result = ConfigLoader.for_root(tmp_path).load_with_trace()

    assert result.config == LintConfig()
    assert result.config.min_confidence == 0.8
    assert result.config.analyzer == "syntax"
    assert not result.config.set_exit_status
    assert result.applied_sources == []


def test_project_file_overrides_pyproject(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        """
[project]
name = "demo"

[tool.unitlint]
min-confidence = 0.5
set-exit-status = true
excludes = ["generated"]

[tool.unitlint.rules]
error-strings = false
""".strip(),
        encoding="utf-8",
    )
    (tmp_path / ".unitlint.toml").write_text("min_confidence = 0.6\n", encoding="utf-8")

    result = ConfigLoader.for_root(tmp_path).load_with_trace()

    assert result.config.min_confidence == 0.6
    assert result.config.set_exit_status
    assert result.config.excludes == ["generated"]
    assert not result.config.rules.is_enabled(RuleCategory.ERROR_STRINGS)
    assert result.config.rules.is_enabled(RuleCategory.IMPORTS)
    assert result.applied_sources == [str(tmp_path / "pyproject.toml"), str(tmp_path / ".unitlint.toml")]


def test_pyproject_without_section_is_ignored(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[project]\nname = "demo"\n', encoding="utf-8")

    assert load_config(tmp_path) == LintConfig()


def test_explicit_config_replaces_project_file(tmp_path: Path) -> None:
    (tmp_path / ".unitlint.toml").write_text("min_confidence = 0.6\n", encoding="utf-8")
    explicit = tmp_path / "ci.toml"
    explicit.write_text('analyzer = "custom"\n', encoding="utf-8")

    config = load_config(tmp_path, project_config=explicit)

    assert config.analyzer == "custom"
    assert config.min_confidence == 0.8


def test_explicit_config_must_exist(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="does not exist"):
        load_config(tmp_path, project_config=tmp_path / "absent.toml")


@pytest.mark.parametrize(
    "content",
    [
        "unknown_key = 1\n",
        "min_confidence = 1.5\n",
        "[rules]\nno_such_rule = false\n",
    ],
)
def test_invalid_values_raise_config_error(tmp_path: Path, content: str) -> None:
    (tmp_path / ".unitlint.toml").write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid configuration"):
        load_config(tmp_path)


def test_malformed_toml_raises_config_error(tmp_path: Path) -> None:
    (tmp_path / ".unitlint.toml").write_text("min_confidence = [\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_config(tmp_path)


def test_rule_selection_overrides() -> None:
    config = LintConfig()
    rules = config.rules.with_overrides({RuleCategory.NAMES: False, RuleCategory.ELSES: None})

    assert not rules.is_enabled(RuleCategory.NAMES)
    assert rules.is_enabled(RuleCategory.ELSES)
    assert RuleCategory.NAMES not in rules.enabled()
    assert len(rules.enabled()) == len(RuleCategory) - 1
    assert config.rules.is_enabled(RuleCategory.NAMES)


def test_rule_categories_cover_every_switch() -> None:
    values = {category.value for category in RuleCategory}

    assert len(RuleCategory) == 18
    assert {"errorf", "inc_dec", "context_key_types", "context_args"} <= values
    assert set(RuleSelection.model_fields) == values

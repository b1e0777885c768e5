# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models for the unitlint front end."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..analysis.rules import RuleSelection
from ..constants import DEFAULT_ANALYZER, DEFAULT_MIN_CONFIDENCE


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class LintConfig(BaseModel):
    """Settings controlling target expansion, engine selection, and reporting."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    min_confidence: float = Field(default=DEFAULT_MIN_CONFIDENCE, ge=0.0, le=1.0)
    set_exit_status: bool = False
    analyzer: str = DEFAULT_ANALYZER
    rules: RuleSelection = Field(default_factory=RuleSelection)
    excludes: list[str] = Field(default_factory=list)


__all__ = ["ConfigError", "LintConfig"]

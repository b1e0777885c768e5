# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Analysis engine contract, rule categories, and engine registry."""

from __future__ import annotations

from .interfaces import Analyzer, AnalyzerError
from .registry import ANALYZER_PLUGIN_GROUP, UnknownAnalyzerError, available_analyzers, create_analyzer
from .rules import RULE_DESCRIPTIONS, RuleCategory, RuleSelection
from .syntax import SyntaxAnalyzer

__all__ = [
    "ANALYZER_PLUGIN_GROUP",
    "Analyzer",
    "AnalyzerError",
    "RULE_DESCRIPTIONS",
    "RuleCategory",
    "RuleSelection",
    "SyntaxAnalyzer",
    "UnknownAnalyzerError",
    "available_analyzers",
    "create_analyzer",
]

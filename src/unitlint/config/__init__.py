# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and layered loading."""

from __future__ import annotations

from .loader import ConfigLoader, ConfigLoadResult, load_config
from .models import ConfigError, LintConfig

__all__ = ["ConfigError", "ConfigLoadResult", "ConfigLoader", "LintConfig", "load_config"]

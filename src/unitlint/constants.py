# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Constants shared by target resolution, configuration, and the CLI."""

from __future__ import annotations

from typing import Final

RECURSIVE_MARKER: Final[str] = "/..."
CURRENT_DIRECTORY: Final[str] = "."

DEFAULT_MIN_CONFIDENCE: Final[float] = 0.8
DEFAULT_ANALYZER: Final[str] = "syntax"

SOURCE_SUFFIX: Final[str] = ".py"
STUB_SUFFIX: Final[str] = ".pyi"
TEST_FILE_PREFIX: Final[str] = "test_"
TEST_FILE_SUFFIX: Final[str] = "_test.py"
CONFTEST_FILE: Final[str] = "conftest.py"

ALWAYS_EXCLUDE_DIRS: Final[frozenset[str]] = frozenset(
    {
        "node_modules",
        "venv",
        "dist",
        "build",
        "__pycache__",
        "coverage",
        "site-packages",
    },
)
EGG_INFO_SUFFIX: Final[str] = ".egg-info"

PROJECT_CONFIG_NAME: Final[str] = ".unitlint.toml"
PYPROJECT_NAME: Final[str] = "pyproject.toml"
PYPROJECT_SECTION: Final[str] = "unitlint"

__all__ = [
    "ALWAYS_EXCLUDE_DIRS",
    "CONFTEST_FILE",
    "CURRENT_DIRECTORY",
    "DEFAULT_ANALYZER",
    "DEFAULT_MIN_CONFIDENCE",
    "EGG_INFO_SUFFIX",
    "PROJECT_CONFIG_NAME",
    "PYPROJECT_NAME",
    "PYPROJECT_SECTION",
    "RECURSIVE_MARKER",
    "SOURCE_SUFFIX",
    "STUB_SUFFIX",
    "TEST_FILE_PREFIX",
    "TEST_FILE_SUFFIX",
]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""unitlint CLI package; the Typer application lives in :mod:`unitlint.cli.app`."""

from __future__ import annotations

from typing import Final

from .shared import CLILogger, build_cli_logger

__all__: Final[list[str]] = ["CLILogger", "build_cli_logger"]

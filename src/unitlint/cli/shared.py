# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for the CLI (user-facing logging)."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

import typer
from rich.console import Console
from rich.text import Text

from ..console import get_console_manager
from ..logging import fail as core_fail
from ..logging import warn as core_warn

_KEY_VALUE_RE: Final[re.Pattern[str]] = re.compile(r"([\w-]+)=(\".*?\"|\S+)")


@dataclass(slots=True)
class CLILogger:
    """Adapter around the logging helpers respecting CLI colour and emoji settings.

    Findings go to stdout through :meth:`echo`; failures, warnings, and debug
    output go to stderr.
    """

    console: Console
    use_emoji: bool
    use_color: bool | None = None
    debug_enabled: bool = False

    def fail(self, message: str) -> None:
        """Log a failure message on stderr.

        Args:
            message: Text describing the failure state.
        """

        core_fail(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def warn(self, message: str) -> None:
        """Log a warning message on stderr.

        Args:
            message: Text describing the warning condition.
        """

        core_warn(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def echo(self, message: str) -> None:
        """Write ``message`` unstyled to stdout.

        Args:
            message: Text written to standard output.
        """

        typer.echo(message)

    def debug(self, message: str) -> None:
        """Emit a debug message when debug logging is enabled.

        Args:
            message: Debug payload; ``key=value`` pairs are highlighted.
        """

        if not self.debug_enabled:
            return
        text = Text("[debug] ", style="bold cyan")
        cursor = 0
        for match in _KEY_VALUE_RE.finditer(message):
            start, end = match.span()
            if start > cursor:
                text.append(message[cursor:start], style="dim")
            key, raw_value = match.group(1), match.group(2)
            text.append(key, style="bold magenta")
            text.append("=", style="dim")
            text.append(raw_value, style="bold green")
            cursor = end
        if cursor < len(message):
            text.append(message[cursor:], style="dim")
        self.console.print(text)


def build_cli_logger(*, emoji: bool, debug: bool = False, no_color: bool = False) -> CLILogger:
    """Return a ``CLILogger`` configured for the provided preferences.

    Args:
        emoji: Whether log output may include emoji glyphs.
        debug: Whether debug logging should be enabled.
        no_color: Whether terminal colour output should be disabled.

    Returns:
        CLILogger: Logger bound to a stderr Rich console.
    """

    console = get_console_manager().get(color=not no_color, emoji=emoji, stderr=True)
    return CLILogger(
        console=console,
        use_emoji=emoji,
        use_color=False if no_color else None,
        debug_enabled=debug,
    )


__all__: Final = ["CLILogger", "build_cli_logger"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typer application exposing the ``unitlint`` command."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Final

import typer

from ..analysis.registry import UnknownAnalyzerError, create_analyzer
from ..analysis.rules import RULE_DESCRIPTIONS, RuleCategory
from ..config import ConfigError, ConfigLoader, LintConfig
from ..discovery.targets import TargetUsageError
from ..models import LintTally
from ..orchestrator import build_orchestrator
from ..reporting import format_failure_summary
from .shared import CLILogger, build_cli_logger

USAGE_EPILOG: Final[str] = "\n\n".join(
    (
        "unitlint [OPTIONS]  # runs on the package in the current directory",
        "unitlint [OPTIONS] [packages]",
        "unitlint [OPTIONS] [directories]  # where a '/...' suffix includes all sub-directories",
        "unitlint [OPTIONS] [files]  # all must belong to a single package",
    ),
)

EXIT_OK: Final[int] = 0
EXIT_FINDINGS: Final[int] = 1

app = typer.Typer(add_completion=False, rich_markup_mode=None)


@dataclass(slots=True)
class CLIOverrides:
    """Options given explicitly on the command line; ``None`` means unset."""

    min_confidence: float | None = None
    set_exit_status: bool | None = None
    analyzer: str | None = None
    rules: dict[RuleCategory, bool | None] | None = None

    def apply(self, config: LintConfig) -> LintConfig:
        """Return ``config`` updated with every explicitly provided option.

        Args:
            config: Configuration loaded from files.

        Returns:
            LintConfig: Copy of ``config`` carrying the overrides.
        """

        update: dict[str, object] = {}
        if self.min_confidence is not None:
            update["min_confidence"] = self.min_confidence
        if self.set_exit_status is not None:
            update["set_exit_status"] = self.set_exit_status
        if self.analyzer is not None:
            update["analyzer"] = self.analyzer
        if self.rules:
            update["rules"] = config.rules.with_overrides(self.rules)
        if not update:
            return config
        return config.model_copy(update=update)


def exit_status(tally: LintTally, *, set_exit_status: bool) -> int:
    """Return the process exit status for a completed run."""

    if set_exit_status and tally.suggestions > 0:
        return EXIT_FINDINGS
    return EXIT_OK


@app.command(epilog=USAGE_EPILOG)
def lint(
    targets: Annotated[
        list[str] | None,
        typer.Argument(help="Directories, files, or packages to lint.", show_default=False),
    ] = None,
    min_confidence: Annotated[
        float | None,
        typer.Option(
            "--min-confidence",
            min=0.0,
            max=1.0,
            help="Minimum confidence of a problem to print it.  [default: 0.8]",
        ),
    ] = None,
    set_exit_status: Annotated[
        bool | None,
        typer.Option(
            "--set-exit-status/--no-set-exit-status",
            help="Set exit status to 1 if any issues are found.",
            show_default=False,
        ),
    ] = None,
    analyzer: Annotated[
        str | None,
        typer.Option("--analyzer", help="Analysis engine to run.  [default: syntax]"),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", dir_okay=False, help="Configuration file used instead of .unitlint.toml."),
    ] = None,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable ANSI colour output.")] = False,
    no_emoji: Annotated[bool, typer.Option("--no-emoji", help="Disable emoji in messages.")] = False,
    debug: Annotated[bool, typer.Option("--debug", help="Print debug output to stderr.")] = False,
    lint_exported: Annotated[
        bool | None,
        typer.Option("--lint-exported/--no-lint-exported", help=RULE_DESCRIPTIONS[RuleCategory.EXPORTED]),
    ] = None,
    lint_package_comments: Annotated[
        bool | None,
        typer.Option(
            "--lint-package-comments/--no-lint-package-comments",
            help=RULE_DESCRIPTIONS[RuleCategory.PACKAGE_COMMENTS],
        ),
    ] = None,
    lint_imports: Annotated[
        bool | None,
        typer.Option("--lint-imports/--no-lint-imports", help=RULE_DESCRIPTIONS[RuleCategory.IMPORTS]),
    ] = None,
    lint_blank_imports: Annotated[
        bool | None,
        typer.Option(
            "--lint-blank-imports/--no-lint-blank-imports",
            help=RULE_DESCRIPTIONS[RuleCategory.BLANK_IMPORTS],
        ),
    ] = None,
    lint_names: Annotated[
        bool | None,
        typer.Option("--lint-names/--no-lint-names", help=RULE_DESCRIPTIONS[RuleCategory.NAMES]),
    ] = None,
    lint_vardecls: Annotated[
        bool | None,
        typer.Option("--lint-vardecls/--no-lint-vardecls", help=RULE_DESCRIPTIONS[RuleCategory.VARDECLS]),
    ] = None,
    lint_elses: Annotated[
        bool | None,
        typer.Option("--lint-elses/--no-lint-elses", help=RULE_DESCRIPTIONS[RuleCategory.ELSES]),
    ] = None,
    lint_ranges: Annotated[
        bool | None,
        typer.Option("--lint-ranges/--no-lint-ranges", help=RULE_DESCRIPTIONS[RuleCategory.RANGES]),
    ] = None,
    lint_errorf: Annotated[
        bool | None,
        typer.Option("--lint-errorf/--no-lint-errorf", help=RULE_DESCRIPTIONS[RuleCategory.ERRORF]),
    ] = None,
    lint_errors: Annotated[
        bool | None,
        typer.Option("--lint-errors/--no-lint-errors", help=RULE_DESCRIPTIONS[RuleCategory.ERRORS]),
    ] = None,
    lint_error_strings: Annotated[
        bool | None,
        typer.Option(
            "--lint-error-strings/--no-lint-error-strings",
            help=RULE_DESCRIPTIONS[RuleCategory.ERROR_STRINGS],
        ),
    ] = None,
    lint_receiver_names: Annotated[
        bool | None,
        typer.Option(
            "--lint-receiver-names/--no-lint-receiver-names",
            help=RULE_DESCRIPTIONS[RuleCategory.RECEIVER_NAMES],
        ),
    ] = None,
    lint_inc_dec: Annotated[
        bool | None,
        typer.Option("--lint-inc-dec/--no-lint-inc-dec", help=RULE_DESCRIPTIONS[RuleCategory.INC_DEC]),
    ] = None,
    lint_error_returns: Annotated[
        bool | None,
        typer.Option(
            "--lint-error-returns/--no-lint-error-returns",
            help=RULE_DESCRIPTIONS[RuleCategory.ERROR_RETURNS],
        ),
    ] = None,
    lint_unexported_return: Annotated[
        bool | None,
        typer.Option(
            "--lint-unexported-return/--no-lint-unexported-return",
            help=RULE_DESCRIPTIONS[RuleCategory.UNEXPORTED_RETURN],
        ),
    ] = None,
    lint_time_names: Annotated[
        bool | None,
        typer.Option("--lint-time-names/--no-lint-time-names", help=RULE_DESCRIPTIONS[RuleCategory.TIME_NAMES]),
    ] = None,
    lint_context_key_types: Annotated[
        bool | None,
        typer.Option(
            "--lint-context-key-types/--no-lint-context-key-types",
            help=RULE_DESCRIPTIONS[RuleCategory.CONTEXT_KEY_TYPES],
        ),
    ] = None,
    lint_context_args: Annotated[
        bool | None,
        typer.Option("--lint-context-args/--no-lint-context-args", help=RULE_DESCRIPTIONS[RuleCategory.CONTEXT_ARGS]),
    ] = None,
) -> None:
    """Lint Python source files and print problems above the confidence threshold."""

    logger = build_cli_logger(emoji=not no_emoji, debug=debug, no_color=no_color)
    overrides = CLIOverrides(
        min_confidence=min_confidence,
        set_exit_status=set_exit_status,
        analyzer=analyzer,
        rules={
            RuleCategory.EXPORTED: lint_exported,
            RuleCategory.PACKAGE_COMMENTS: lint_package_comments,
            RuleCategory.IMPORTS: lint_imports,
            RuleCategory.BLANK_IMPORTS: lint_blank_imports,
            RuleCategory.NAMES: lint_names,
            RuleCategory.VARDECLS: lint_vardecls,
            RuleCategory.ELSES: lint_elses,
            RuleCategory.RANGES: lint_ranges,
            RuleCategory.ERRORF: lint_errorf,
            RuleCategory.ERRORS: lint_errors,
            RuleCategory.ERROR_STRINGS: lint_error_strings,
            RuleCategory.RECEIVER_NAMES: lint_receiver_names,
            RuleCategory.INC_DEC: lint_inc_dec,
            RuleCategory.ERROR_RETURNS: lint_error_returns,
            RuleCategory.UNEXPORTED_RETURN: lint_unexported_return,
            RuleCategory.TIME_NAMES: lint_time_names,
            RuleCategory.CONTEXT_KEY_TYPES: lint_context_key_types,
            RuleCategory.CONTEXT_ARGS: lint_context_args,
        },
    )
    config = _load_config(config_path, overrides, logger=logger)
    code = _run_lint(targets or [], config, logger=logger)
    raise typer.Exit(code=code)


def _load_config(config_path: Path | None, overrides: CLIOverrides, *, logger: CLILogger) -> LintConfig:
    """Load file configuration and apply command-line overrides.

    Raises:
        typer.BadParameter: If configuration loading fails.
    """

    try:
        loaded = ConfigLoader.for_root(Path.cwd(), project_config=config_path).load_with_trace()
    except ConfigError as exc:
        raise typer.BadParameter(str(exc), param_hint="'--config'") from exc
    for source in loaded.applied_sources:
        logger.debug(f"config source={source}")
    return overrides.apply(loaded.config)


def _run_lint(targets: list[str], config: LintConfig, *, logger: CLILogger) -> int:
    """Run the orchestrator and return the exit status.

    Raises:
        typer.BadParameter: If the analyzer is unknown or the targets mix kinds.
    """

    def _skip_plugin(name: str, exc: Exception) -> None:
        logger.warn(f"skipping analyzer plugin {name}: {exc}")

    try:
        engine = create_analyzer(config.analyzer, on_error=_skip_plugin)
    except UnknownAnalyzerError as exc:
        raise typer.BadParameter(str(exc), param_hint="'--analyzer'") from exc
    logger.debug(f"analyzer={engine.name} min_confidence={config.min_confidence}")

    orchestrator = build_orchestrator(config, engine, logger)
    try:
        tally = orchestrator.run(targets)
    except TargetUsageError as exc:
        raise typer.BadParameter(str(exc), param_hint="'TARGETS...'") from exc

    code = exit_status(tally, set_exit_status=config.set_exit_status)
    if code == EXIT_FINDINGS:
        typer.echo(format_failure_summary(tally.suggestions), err=True)
    return code


def main() -> None:
    """Console-script entry point."""

    app()


__all__ = ["CLIOverrides", "app", "exit_status", "lint", "main"]

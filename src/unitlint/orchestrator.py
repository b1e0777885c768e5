# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Drive target classification, expansion, resolution, and linting."""

from __future__ import annotations

import os
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from functools import partial

from .analysis.interfaces import Analyzer
from .cli.shared import CLILogger
from .config.models import LintConfig
from .constants import CURRENT_DIRECTORY
from .discovery.targets import RunKind, Target, plan_targets
from .models import CompilationUnit, LintTally
from .reporting import Reporter
from .resolution import NoSourcesError, PackageInfo, PackageResolver, ResolutionError

FILES_UNIT_LABEL = "<files>"


@dataclass(slots=True)
class Orchestrator:
    """Top-level control flow of a lint run.

    Attributes:
        resolver: Adapter turning directories and packages into file lists.
        reporter: Reporter linting each resolved unit.
        logger: Logger receiving per-target errors and debug output.
    """

    resolver: PackageResolver
    reporter: Reporter
    logger: CLILogger

    def run(self, args: Sequence[str]) -> LintTally:
        """Lint every target in ``args``; no arguments lints the current directory.

        Args:
            args: Raw command-line targets.

        Returns:
            LintTally: Accumulated count of printed findings and linted units.

        Raises:
            TargetUsageError: If the targets mix kinds; raised before any linting.
        """

        plan = plan_targets(list(args) or [CURRENT_DIRECTORY])
        self.logger.debug(f"run kind={plan.kind.value} targets={len(plan.targets)}")
        if plan.kind is RunKind.DIRECTORIES:
            self._lint_directories(plan.targets)
        elif plan.kind is RunKind.FILES:
            self._lint_files(plan.arguments)
        else:
            self._lint_packages(plan.arguments)
        return self.reporter.tally

    def expand_directories(self, targets: Sequence[Target]) -> list[str]:
        """Return the de-duplicated directories visited for ``targets``.

        Args:
            targets: Directory targets, optionally recursive.

        Returns:
            list[str]: Normalised directories in first-seen order.
        """

        directories: dict[str, None] = {}
        for target in targets:
            if target.recursive:
                expanded = self.resolver.expand_dir(target.path)
            else:
                expanded = [target.path]
            for directory in expanded:
                directories.setdefault(os.path.normpath(directory), None)
        return list(directories)

    def expand_packages(self, specs: Sequence[str]) -> list[str]:
        """Return the de-duplicated package specifiers visited for ``specs``.

        Recursive specifiers whose root cannot be located are reported and
        skipped.

        Args:
            specs: Package specifiers, optionally carrying ``/...``.

        Returns:
            list[str]: Specifiers in first-seen order.
        """

        packages: dict[str, None] = {}
        for spec in specs:
            try:
                expanded = self.resolver.expand_package(spec, CURRENT_DIRECTORY)
            except ResolutionError as exc:
                self.logger.fail(str(exc))
                continue
            for name in expanded:
                packages.setdefault(name, None)
        return list(packages)

    def _lint_directories(self, targets: Sequence[Target]) -> None:
        for directory in self.expand_directories(targets):
            self._lint_resolved(partial(self.resolver.resolve_dir, directory))

    def _lint_files(self, paths: Sequence[str]) -> None:
        self.reporter.lint(CompilationUnit.from_paths(FILES_UNIT_LABEL, paths))

    def _lint_packages(self, specs: Sequence[str]) -> None:
        for spec in self.expand_packages(specs):
            self._lint_resolved(partial(self.resolver.resolve_package, spec, CURRENT_DIRECTORY))

    def _lint_resolved(self, resolve: Callable[[], PackageInfo]) -> None:
        """Resolve one unit and lint it, reporting failures other than no-sources."""

        try:
            info = resolve()
        except NoSourcesError as exc:
            self.logger.debug(f"skipped={exc.directory} reason=no-sources")
            return
        except ResolutionError as exc:
            self.logger.fail(str(exc))
            return
        files = info.files()
        if not files:
            return
        self.logger.debug(f"unit={info.name} dir={info.directory} files={len(files)}")
        self.reporter.lint(CompilationUnit.from_paths(info.name, files))


def build_orchestrator(config: LintConfig, analyzer: Analyzer, logger: CLILogger) -> Orchestrator:
    """Wire an :class:`Orchestrator` from configuration.

    Args:
        config: Resolved configuration.
        analyzer: Engine used for every unit.
        logger: CLI logger shared by every component.

    Returns:
        Orchestrator: Ready-to-run orchestrator with a fresh tally.
    """

    reporter = Reporter(
        analyzer=analyzer,
        rules=config.rules,
        min_confidence=config.min_confidence,
        logger=logger,
    )
    return Orchestrator(
        resolver=PackageResolver(excludes=config.excludes),
        reporter=reporter,
        logger=logger,
    )


__all__ = ["FILES_UNIT_LABEL", "Orchestrator", "build_orchestrator"]

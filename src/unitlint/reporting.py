# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run the analysis engine on a unit, then filter, print, and count its findings."""

from __future__ import annotations

from dataclasses import dataclass, field

from .analysis.interfaces import Analyzer, AnalyzerError
from .analysis.rules import RuleSelection
from .cli.shared import CLILogger
from .models import CompilationUnit, Finding, LintTally
from .reader import read_sources


def meets_threshold(finding: Finding, min_confidence: float) -> bool:
    """Return whether ``finding`` should be reported; the bound is inclusive."""

    return finding.confidence >= min_confidence


def format_failure_summary(suggestions: int) -> str:
    """Return the stderr message printed when findings fail the run."""

    return f"Found {suggestions} lint suggestions; failing."


@dataclass(slots=True)
class Reporter:
    """Lint compilation units and accumulate the printed findings.

    Attributes:
        analyzer: Engine invoked once per unit.
        rules: Rule categories forwarded to the engine.
        min_confidence: Inclusive confidence threshold for printing.
        logger: Logger receiving findings (stdout) and errors (stderr).
        tally: Accumulator shared by every unit of the run.
    """

    analyzer: Analyzer
    rules: RuleSelection
    min_confidence: float
    logger: CLILogger
    tally: LintTally = field(default_factory=LintTally)

    def lint(self, unit: CompilationUnit) -> int:
        """Read, analyse, and report a single compilation unit.

        Unreadable files are reported and dropped; an engine failure is
        reported and leaves the unit without findings.

        Args:
            unit: Files forming one engine invocation.

        Returns:
            int: Number of findings printed for ``unit``.
        """

        result = read_sources(unit.paths)
        for failure in result.failures:
            self.logger.fail(failure.describe())
        if not result.sources:
            self.logger.debug(f"unit={unit.label} skipped=no-readable-files")
            return 0

        self.tally.record_unit()
        try:
            findings = self.analyzer.lint_files(result.sources, self.rules)
        except AnalyzerError as exc:
            self.logger.fail(str(exc))
            return 0

        printed = 0
        for finding in findings:
            if not meets_threshold(finding, self.min_confidence):
                continue
            self.logger.echo(finding.render())
            self.tally.record_finding()
            printed += 1
        return printed


__all__ = ["Reporter", "format_failure_summary", "meets_threshold"]

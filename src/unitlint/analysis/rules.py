# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rule categories forwarded to analysis engines."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class RuleCategory(str, Enum):
    """Enumerate the independently toggled categories of checks."""

    EXPORTED = "exported"
    PACKAGE_COMMENTS = "package_comments"
    IMPORTS = "imports"
    BLANK_IMPORTS = "blank_imports"
    NAMES = "names"
    VARDECLS = "vardecls"
    ELSES = "elses"
    RANGES = "ranges"
    ERRORF = "errorf"
    ERRORS = "errors"
    ERROR_STRINGS = "error_strings"
    RECEIVER_NAMES = "receiver_names"
    INC_DEC = "inc_dec"
    ERROR_RETURNS = "error_returns"
    UNEXPORTED_RETURN = "unexported_return"
    TIME_NAMES = "time_names"
    CONTEXT_KEY_TYPES = "context_key_types"
    CONTEXT_ARGS = "context_args"

    @property
    def flag(self) -> str:
        """Return the CLI switch stem, e.g. ``lint-error-strings``."""

        return "lint-" + self.value.replace("_", "-")


RULE_DESCRIPTIONS: dict[RuleCategory, str] = {
    RuleCategory.EXPORTED: "Lint public functions, classes, and constants.",
    RuleCategory.PACKAGE_COMMENTS: "Lint module and package docstrings.",
    RuleCategory.IMPORTS: "Lint import statements.",
    RuleCategory.BLANK_IMPORTS: "Lint side-effect-only imports.",
    RuleCategory.NAMES: "Lint naming conventions.",
    RuleCategory.VARDECLS: "Lint variable declarations and annotations.",
    RuleCategory.ELSES: "Lint else branches following return.",
    RuleCategory.RANGES: "Lint range-based loops.",
    RuleCategory.ERRORF: "Lint exception messages formatted before construction.",
    RuleCategory.ERRORS: "Lint exception class definitions.",
    RuleCategory.ERROR_STRINGS: "Lint exception message strings.",
    RuleCategory.RECEIVER_NAMES: "Lint self and cls parameter names.",
    RuleCategory.INC_DEC: "Lint increments and decrements spelled as x = x + 1.",
    RuleCategory.ERROR_RETURNS: "Lint functions returning exceptions instead of raising.",
    RuleCategory.UNEXPORTED_RETURN: "Lint public functions returning private types.",
    RuleCategory.TIME_NAMES: "Lint duration names carrying unit suffixes.",
    RuleCategory.CONTEXT_KEY_TYPES: "Lint contextvars.ContextVar keys of built-in types.",
    RuleCategory.CONTEXT_ARGS: "Lint context parameters that are not first in a signature.",
}


class RuleSelection(BaseModel):
    """Snapshot of which rule categories are enabled for an engine run."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    exported: bool = True
    package_comments: bool = True
    imports: bool = True
    blank_imports: bool = True
    names: bool = True
    vardecls: bool = True
    elses: bool = True
    ranges: bool = True
    errorf: bool = True
    errors: bool = True
    error_strings: bool = True
    receiver_names: bool = True
    inc_dec: bool = True
    error_returns: bool = True
    unexported_return: bool = True
    time_names: bool = True
    context_key_types: bool = True
    context_args: bool = True

    def is_enabled(self, category: RuleCategory) -> bool:
        return bool(getattr(self, category.value))

    def enabled(self) -> tuple[RuleCategory, ...]:
        """Return the enabled categories in declaration order."""

        return tuple(category for category in RuleCategory if self.is_enabled(category))

    def with_overrides(self, overrides: dict[RuleCategory, bool | None]) -> RuleSelection:
        """Return a copy applying every override that is not ``None``.

        Args:
            overrides: Mapping of category to explicit toggle, ``None`` meaning unset.

        Returns:
            RuleSelection: Updated selection.
        """

        update = {category.value: value for category, value in overrides.items() if value is not None}
        if not update:
            return self
        return self.model_copy(update=update)


__all__ = ["RULE_DESCRIPTIONS", "RuleCategory", "RuleSelection"]

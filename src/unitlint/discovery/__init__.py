# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Target classification and directory expansion helpers."""

from __future__ import annotations

from .targets import (
    MixedTargetsError,
    NoTargetsError,
    RunKind,
    RunPlan,
    Target,
    TargetKind,
    TargetUsageError,
    classify_target,
    plan_targets,
)
from .walker import expand_directory, iter_directories, should_skip_directory

__all__ = [
    "MixedTargetsError",
    "NoTargetsError",
    "RunKind",
    "RunPlan",
    "Target",
    "TargetKind",
    "TargetUsageError",
    "classify_target",
    "expand_directory",
    "iter_directories",
    "plan_targets",
    "should_skip_directory",
]

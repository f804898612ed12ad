# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Friendly, column-aligned terminal reports for lint engine results."""

from __future__ import annotations

from .config import ConfigError, RenderConfiguration
from .diagnostics import ReportInputError, load_results
from .models import FileResult, LintMessage
from .reporting import Styler, format_results, render_report
from .severity import Severity

__all__ = [
    "ConfigError",
    "FileResult",
    "LintMessage",
    "RenderConfiguration",
    "ReportInputError",
    "Severity",
    "Styler",
    "format_results",
    "load_results",
    "render_report",
]

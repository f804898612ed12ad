# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Report rendering: rows, tables, summaries and composition."""

from __future__ import annotations

from .formatter import REPORT_SEPARATOR, compose_report, format_results, render_report
from .rows import RowBatch, build_rows, pointer_line, strip_trailing_period
from .styles import Styler, rule_url
from .summary import pluralize, problem_line, render_category_summary
from .table import render_table

__all__ = [
    "REPORT_SEPARATOR",
    "RowBatch",
    "Styler",
    "build_rows",
    "compose_report",
    "format_results",
    "pluralize",
    "pointer_line",
    "problem_line",
    "render_category_summary",
    "render_report",
    "render_table",
    "rule_url",
    "strip_trailing_period",
]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Report composition: the formatter entry points."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Final

from ..config import ConfigError, RenderConfiguration
from ..diagnostics.filtering import filter_by_category
from ..diagnostics.pipeline import PathResolver, flatten_results, resolve_absolute, sort_messages
from ..logging import stdout_supports_color
from ..models import FileResult
from ..severity import Severity
from .rows import RowBatch, build_rows
from .styles import Styler
from .summary import problem_line, render_category_summary
from .table import Alignment, render_table

LOGGER = logging.getLogger(__name__)

ROW_ALIGNMENT: Final[tuple[Alignment, ...]] = ("", "l", "l", "l")
REPORT_SEPARATOR: Final[str] = "=" * 58
ERRORS_TITLE: Final[str] = "Errors"
WARNINGS_TITLE: Final[str] = "Warnings"

ResultInput = FileResult | Mapping[str, Any]


def _coerce_results(results: Iterable[ResultInput] | None) -> list[FileResult]:
    if results is None:
        return []
    return [item if isinstance(item, FileResult) else FileResult.model_validate(item) for item in results]


def compose_report(batch: RowBatch, styler: Styler) -> str:
    """Join the main table, the problem line and the category summaries.

    Args:
        batch: Rows and counts produced by :func:`build_rows`.
        styler: Styling collaborator.

    Returns:
        str: The full report, or an empty string when ``batch`` has no rows.
    """

    if not batch.rows:
        return ""
    parts = [
        "\n",
        render_table(batch.rows, align=ROW_ALIGNMENT),
        "\n\n",
        problem_line(batch.errors, batch.warnings, styler),
        "\n",
    ]
    if batch.errors:
        parts.append(render_category_summary(batch.error_tally, ERRORS_TITLE, Severity.ERROR, styler))
    if batch.warnings:
        parts.append(render_category_summary(batch.warning_tally, WARNINGS_TITLE, Severity.WARNING, styler))
    parts.append(f"\n\n{REPORT_SEPARATOR}")
    return "".join(parts)


def render_report(
    results: Iterable[ResultInput] | None,
    config: RenderConfiguration | None = None,
    *,
    styler: Styler | None = None,
    resolve_path: PathResolver = resolve_absolute,
) -> str:
    """Render engine results as a human-readable report.

    This is a pure function of its arguments: it reads no environment and
    writes nothing.

    Args:
        results: Per-file engine results, as models or decoded JSON mappings.
        config: Sorting, filtering and decoration options. Defaults apply when omitted.
        styler: Styling collaborator; derived from ``config`` when omitted.
        resolve_path: Path absolution collaborator used with ``absolute_paths``.

    Returns:
        str: The report, or an empty string when no message survives filtering.
    """

    active = config or RenderConfiguration()
    active_styler = styler or Styler(color=active.color, link_rules=active.link_rules)
    messages = flatten_results(
        _coerce_results(results),
        absolute_paths=active.absolute_paths,
        resolve_path=resolve_path,
    )
    ordered = sort_messages(messages, group_by_category=active.group_by_category)
    kept = filter_by_category(ordered, active.filter_category)
    if not kept:
        return ""
    batch = build_rows(kept, active_styler, editor_link_scheme=active.editor_link_scheme)
    LOGGER.debug("rendering %d error(s) and %d warning(s)", batch.errors, batch.warnings)
    return compose_report(batch, active_styler)


def format_results(
    results: Iterable[ResultInput] | None,
    *,
    argv: Sequence[str] | None = None,
    env: Mapping[str, str] | None = None,
    color: bool | None = None,
) -> str:
    """Engine-facing formatter entry point.

    Builds the configuration from the formatter arguments and ``EFF_*``
    environment variables, then delegates to :func:`render_report`.

    Args:
        results: Per-file engine results.
        argv: Argument vector; defaults to :data:`sys.argv`.
        env: Environment mapping; defaults to :data:`os.environ`.
        color: Force colour on or off; defaults to TTY detection.

    Returns:
        str: The rendered report. Unparseable formatter arguments are logged
        and replaced by their defaults; the environment still applies.
    """

    environ = os.environ if env is None else env
    use_color = stdout_supports_color() if color is None else color
    try:
        config = RenderConfiguration.from_sources(sys.argv if argv is None else argv, environ, color=use_color)
    except ConfigError as exc:
        LOGGER.warning("ignoring formatter arguments: %s", exc)
        config = RenderConfiguration.from_sources((), environ, color=use_color)
    return render_report(results, config)


__all__ = ["REPORT_SEPARATOR", "compose_report", "format_results", "render_report"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Per-category summary tables and the problem count line."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Final

from ..severity import Severity
from .styles import Styler
from .table import Alignment, render_table

SUMMARY_ALIGNMENT: Final[tuple[Alignment, ...]] = ("", "r", "l")
PROBLEM_GLYPH: Final[str] = "✘"


def pluralize(word: str, count: int) -> str:
    """Return ``word`` with an ``s`` appended unless ``count`` is one."""

    return word if count == 1 else f"{word}s"


def problem_line(errors: int, warnings: int, styler: Styler) -> str:
    """Return the styled ``N problems (E errors, W warnings)`` line.

    The line is red when any error is present and yellow otherwise.
    """

    total = errors + warnings
    text = (
        f"{PROBLEM_GLYPH} {total} {pluralize('problem', total)} "
        f"({errors} {pluralize('error', errors)}, {warnings} {pluralize('warning', warnings)})"
    )
    role = Severity.ERROR if errors else Severity.WARNING
    return styler.paint(text, f"bold {role.color}")


def ranked_categories(tally: Mapping[str, int]) -> list[tuple[str, int]]:
    """Return tally entries by descending count; ties keep insertion order."""

    return sorted(tally.items(), key=lambda item: -item[1])


def render_category_summary(tally: Mapping[str, int], title: str, role: Severity, styler: Styler) -> str:
    """Render the summary table for one severity class.

    Args:
        tally: Occurrence count per rule id.
        title: Heading printed above the table.
        role: Severity class the tally belongs to.
        styler: Styling collaborator.

    Returns:
        str: Heading and table, or an empty string when ``tally`` is empty.
    """

    if not tally:
        return ""
    rows = [["", str(count), styler.rule(category, role)] for category, count in ranked_categories(tally)]
    return f"\n{styler.heading(f'{title}:', role)}\n{render_table(rows, align=SUMMARY_ALIGNMENT)}"


__all__ = ["pluralize", "problem_line", "ranked_categories", "render_category_summary"]

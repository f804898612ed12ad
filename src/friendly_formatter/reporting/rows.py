# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Conversion of ordered lint messages into report table rows."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Final

from ..models import LintMessage
from ..severity import Severity
from .styles import Styler

MAX_SOURCE_LENGTH: Final[int] = 1000
BLOCK_INDENT: Final[str] = "  "
GLYPH_SEPARATOR: Final[str] = "  "
POINTER_CARET: Final[str] = "^"
TAB: Final[str] = "\t"
TRAILING_PERIOD: Final[str] = "."

CategoryTally = dict[str, int]
Row = list[str]


@dataclass(slots=True)
class RowBatch:
    """Rendered rows together with the counts gathered while building them."""

    rows: list[Row] = field(default_factory=list)
    errors: int = 0
    warnings: int = 0
    error_tally: CategoryTally = field(default_factory=dict)
    warning_tally: CategoryTally = field(default_factory=dict)

    @property
    def total(self) -> int:
        return self.errors + self.warnings

    def record(self, role: Severity, category: str) -> None:
        """Count one message of ``role`` under ``category``."""
        if role is Severity.ERROR:
            self.errors += 1
            tally = self.error_tally
        else:
            self.warnings += 1
            tally = self.warning_tally
        tally[category] = tally.get(category, 0) + 1


def has_usable_source(message: LintMessage) -> bool:
    """Return ``True`` when the message carries a source line worth echoing."""

    return message.source is not None and len(message.source) < MAX_SOURCE_LENGTH


def pointer_line(source: str, column: int) -> str:
    """Return the caret line marking ``column`` (1-based) beneath ``source``.

    Tabs preceding the column are copied so the caret lines up with the
    source line however the terminal expands them.
    """

    offset = max(column - 1, 0)
    lead = "".join(TAB if source[index : index + 1] == TAB else " " for index in range(offset))
    return f"{lead}{POINTER_CARET}"


def strip_trailing_period(text: str) -> str:
    return text.removesuffix(TRAILING_PERIOD)


def location_block(
    message: LintMessage,
    styler: Styler,
    *,
    editor_link_scheme: str | None = None,
) -> str:
    """Return the multi-line location cell for ``message``.

    The block opens with a line break so it renders beneath the message row:
    the location line, the editor link (when a scheme is configured), then the
    source line and its pointer (when the source is usable).
    """

    file_path = message.file_path or ""
    line = message.line or 0
    column = message.column or 0
    lines = ["", f"{BLOCK_INDENT}{styler.location(file_path, line, column)}"]
    if editor_link_scheme:
        lines.append(f"{BLOCK_INDENT}{styler.editor_link(editor_link_scheme, file_path, line, column)}")
    source = message.source
    if source is not None and has_usable_source(message):
        lines.append(f"{BLOCK_INDENT}{source}")
        lines.append(f"{BLOCK_INDENT}{pointer_line(source, column)}")
    return "\n".join(lines)


def build_rows(
    messages: Iterable[LintMessage],
    styler: Styler,
    *,
    editor_link_scheme: str | None = None,
) -> RowBatch:
    """Build one table row per message, counting roles and categories.

    Args:
        messages: Filtered messages in report order.
        styler: Styling collaborator.
        editor_link_scheme: Optional editor URL template.

    Returns:
        RowBatch: Rows in input order with error/warning totals and tallies.
    """

    batch = RowBatch()
    for message in messages:
        role = message.role
        batch.record(role, message.category)
        batch.rows.append(
            [
                "",
                f"{styler.glyph(role)}{GLYPH_SEPARATOR}{styler.rule(message.category, role)}",
                styler.message(strip_trailing_period(message.message), role),
                location_block(message, styler, editor_link_scheme=editor_link_scheme),
            ],
        )
    return batch


__all__ = [
    "CategoryTally",
    "MAX_SOURCE_LENGTH",
    "RowBatch",
    "build_rows",
    "has_usable_source",
    "location_block",
    "pointer_line",
    "strip_trailing_period",
]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Plain text table layout with ANSI-aware column widths."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Final, Literal

from ..logging import visible_length

Alignment = Literal["l", "r", "c", ""]
StringLength = Callable[[str], int]

COLUMN_SEPARATOR: Final[str] = "  "
LINE_BREAK: Final[str] = "\n"


def _pad(text: str, width: int, alignment: Alignment, string_length: StringLength) -> str:
    gap = max(width - string_length(text), 0)
    if alignment == "r":
        return " " * gap + text
    if alignment == "c":
        left = gap // 2
        return " " * left + text + " " * (gap - left)
    return text + " " * gap


def render_table(
    rows: Sequence[Sequence[str]],
    *,
    align: Sequence[Alignment] = (),
    string_length: StringLength = visible_length,
    separator: str = COLUMN_SEPARATOR,
) -> str:
    """Lay out ``rows`` as aligned text columns.

    Cells may contain line breaks. The first line of each cell takes part in
    the column layout; the remaining lines hang flush-left underneath the row
    they belong to, in column order. Trailing whitespace is trimmed from every
    rendered line.

    Args:
        rows: Table rows; shorter rows are padded with empty cells.
        align: Per-column alignment, ``"l"`` (default), ``"r"`` or ``"c"``.
        string_length: Width measurement for a single line of text.
        separator: Text placed between adjacent columns.

    Returns:
        str: Rendered table, or an empty string when there are no rows.
    """

    if not rows:
        return ""

    split_rows = [[cell.split(LINE_BREAK) for cell in row] for row in rows]
    column_count = max(len(row) for row in split_rows)
    widths = [0] * column_count
    for row in split_rows:
        for index, lines in enumerate(row):
            widths[index] = max(widths[index], string_length(lines[0]))

    rendered: list[str] = []
    for row in split_rows:
        heads: list[str] = []
        for index in range(column_count):
            head = row[index][0] if index < len(row) else ""
            alignment: Alignment = align[index] if index < len(align) else "l"
            heads.append(_pad(head, widths[index], alignment, string_length))
        rendered.append(separator.join(heads).rstrip())
        for lines in row:
            rendered.extend(line.rstrip() for line in lines[1:])
    return LINE_BREAK.join(rendered)


__all__ = ["Alignment", "COLUMN_SEPARATOR", "StringLength", "render_table"]

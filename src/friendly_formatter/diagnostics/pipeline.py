# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Flattening and ordering of engine results."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path

from ..models import FileResult, LintMessage

LOGGER = logging.getLogger(__name__)

PathResolver = Callable[[str], str]
SortKey = tuple[int, str, tuple[str, str], int, int]


def resolve_absolute(path: str) -> str:
    """Return ``path`` rewritten as an absolute path."""

    return str(Path(path).resolve())


def flatten_results(
    results: Iterable[FileResult],
    *,
    absolute_paths: bool = False,
    resolve_path: PathResolver = resolve_absolute,
) -> list[LintMessage]:
    """Merge per-file messages into one list bound to their file paths.

    Args:
        results: Engine results in reporting order.
        absolute_paths: Rewrite each path through ``resolve_path`` before binding.
        resolve_path: Path absolution collaborator.

    Returns:
        list[LintMessage]: Copies of every message carrying its file path.
    """

    flattened: list[LintMessage] = []
    for result in results:
        if not result.messages:
            continue
        file_path = resolve_path(result.file_path) if absolute_paths else result.file_path
        flattened.extend(message.located(file_path) for message in result.messages)
    LOGGER.debug("flattened %d message(s) from engine results", len(flattened))
    return flattened


def sort_key(message: LintMessage, *, group_by_category: bool = False) -> SortKey:
    """Return the ordering key of ``message``.

    Warnings sort before errors. The rule id only participates when grouping
    by category. Paths compare case-insensitively first, falling back to the
    raw path so the order stays total.
    """

    path = message.file_path or ""
    return (
        message.severity,
        message.category if group_by_category else "",
        (path.casefold(), path),
        message.line or 0,
        message.column or 0,
    )


def sort_messages(messages: Sequence[LintMessage], *, group_by_category: bool = False) -> list[LintMessage]:
    """Return ``messages`` in report order; equal keys keep their input order."""

    return sorted(messages, key=lambda message: sort_key(message, group_by_category=group_by_category))


__all__ = ["PathResolver", "flatten_results", "resolve_absolute", "sort_key", "sort_messages"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Loading of lint engine JSON reports."""

from __future__ import annotations

import json
from typing import Any

from pydantic import TypeAdapter, ValidationError

from ..models import FileResult

__all__ = ["ReportInputError", "load_results", "parse_results"]

_RESULTS_ADAPTER: TypeAdapter[list[FileResult]] = TypeAdapter(list[FileResult])


class ReportInputError(ValueError):
    """Raised when an engine report cannot be decoded into file results."""


def parse_results(payload: Any) -> list[FileResult]:
    """Validate decoded JSON ``payload`` as a list of file results.

    Args:
        payload: Decoded JSON document, normally the output of ``eslint -f json``.

    Returns:
        list[FileResult]: Validated results in document order.

    Raises:
        ReportInputError: If the payload does not have the expected shape,
            including messages lacking ``message`` or ``severity``.
    """

    if payload is None:
        return []
    try:
        return _RESULTS_ADAPTER.validate_python(payload)
    except ValidationError as exc:
        raise ReportInputError(f"invalid lint report: {exc.error_count()} validation error(s)\n{exc}") from exc


def load_results(text: str) -> list[FileResult]:
    """Decode a JSON report string into file results.

    Blank input is treated as an empty report.

    Raises:
        ReportInputError: If ``text`` is not valid JSON or not a valid report.
    """

    if not text.strip():
        return []
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ReportInputError(f"invalid JSON report: {exc}") from exc
    return parse_results(payload)

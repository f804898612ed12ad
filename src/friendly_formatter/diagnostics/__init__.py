# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Diagnostic loading, flattening, ordering and filtering."""

from __future__ import annotations

from .filtering import filter_by_category
from .json_import import ReportInputError, load_results, parse_results
from .pipeline import flatten_results, resolve_absolute, sort_key, sort_messages

__all__ = [
    "ReportInputError",
    "filter_by_category",
    "flatten_results",
    "load_results",
    "parse_results",
    "resolve_absolute",
    "sort_key",
    "sort_messages",
]

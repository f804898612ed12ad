# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Category filtering applied before any counting takes place."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..models import LintMessage

LOGGER = logging.getLogger(__name__)


def filter_by_category(messages: Sequence[LintMessage], category: str | None) -> list[LintMessage]:
    """Keep only the messages whose rule id equals ``category``.

    Args:
        messages: Ordered messages to filter.
        category: Rule id to keep. ``None`` or an empty string disables filtering.

    Returns:
        list[LintMessage]: Matching messages in their original order. The match
        is exact and case-sensitive, and messages without a rule id never match.
    """

    if not category:
        return list(messages)
    kept = [message for message in messages if message.rule_id == category]
    LOGGER.debug("filter %r kept %d of %d message(s)", category, len(kept), len(messages))
    return kept


__all__ = ["filter_by_category"]

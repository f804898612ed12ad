# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from friendly_formatter.config import RenderConfiguration
from friendly_formatter.models import FileResult, LintMessage
from friendly_formatter.reporting.styles import Styler

ResultFactory = Callable[..., FileResult]


def _payload(**overrides: Any) -> dict[str, Any]:
    """Return an engine-shaped message payload."""
    payload: dict[str, Any] = {
        "ruleId": "semi",
        "severity": 2,
        "message": "Missing semicolon.",
        "line": 1,
        "column": 1,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def make_result() -> ResultFactory:
    """Return a factory building :class:`FileResult` objects from payloads."""

    def factory(file_path: str, *messages: dict[str, Any]) -> FileResult:
        return FileResult.model_validate({"filePath": file_path, "messages": list(messages)})

    return factory


@pytest.fixture
def plain_config() -> RenderConfiguration:
    """Return the default configuration with colour disabled."""
    return RenderConfiguration(color=False)


@pytest.fixture
def plain_styler() -> Styler:
    return Styler(color=False)


@pytest.fixture
def located() -> Callable[..., LintMessage]:
    def factory(file_path: str, **overrides: Any) -> LintMessage:
        return LintMessage.model_validate(_payload(**overrides)).located(file_path)

    return factory


@pytest.fixture
def payload() -> Callable[..., dict[str, Any]]:
    """Return a factory for engine-shaped message payloads."""
    return _payload

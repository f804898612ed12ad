# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models describing lint engine results."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .severity import Severity


class LintMessage(BaseModel):
    """Single diagnostic reported by the lint engine.

    Engine payloads use camelCase keys (``filePath``, ``ruleId``); both the
    aliases and the field names are accepted. Keys the formatter does not use
    (``nodeType``, ``endLine``, ``fix`` ...) are ignored.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    file_path: str | None = Field(default=None, alias="filePath")
    line: int | None = Field(default=None, ge=0)
    column: int | None = Field(default=None, ge=0)
    severity: int
    fatal: bool | None = None
    rule_id: str | None = Field(default=None, alias="ruleId")
    message: str
    source: str | None = None

    @property
    def role(self) -> Severity:
        """Return the error/warning role of the message."""
        return Severity.classify(self.severity, self.fatal)

    @property
    def category(self) -> str:
        """Return the rule id, or an empty string for unclassified messages."""
        return self.rule_id or ""

    def located(self, file_path: str) -> LintMessage:
        """Return a copy of the message bound to ``file_path``.

        Args:
            file_path: Path of the file the message was reported against.

        Returns:
            LintMessage: New message; the receiver is left untouched.
        """

        return self.model_copy(update={"file_path": file_path})


class FileResult(BaseModel):
    """Messages reported by the engine for one file."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    file_path: str = Field(alias="filePath")
    messages: tuple[LintMessage, ...] = Field(default_factory=tuple)

    @field_validator("messages", mode="before")
    @classmethod
    def _coerce_messages(cls, value: object) -> object:
        if value is None:
            return ()
        return value


__all__ = ["FileResult", "LintMessage"]

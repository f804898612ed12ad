# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and helpers."""

from __future__ import annotations

from enum import Enum
from typing import Final

ENGINE_WARNING: Final[int] = 1
ENGINE_ERROR: Final[int] = 2


class Severity(str, Enum):
    """Semantic role of a diagnostic, used for counting and styling."""

    ERROR = "error"
    WARNING = "warning"

    @classmethod
    def classify(cls, severity: int | None, fatal: bool | None = None) -> Severity:
        """Resolve an engine severity level to a :class:`Severity`.

        A fatal message is always an error, whatever its numeric level.
        """

        if fatal or severity == ENGINE_ERROR:
            return cls.ERROR
        return cls.WARNING

    @property
    def color(self) -> str:
        """Return the ANSI colour name associated with the role."""

        return _SEVERITY_COLORS[self]

    @property
    def glyph(self) -> str:
        """Return the marker printed in front of diagnostics of this role."""

        return _SEVERITY_GLYPHS[self]


_SEVERITY_COLORS: Final[dict[Severity, str]] = {
    Severity.ERROR: "red",
    Severity.WARNING: "yellow",
}

_SEVERITY_GLYPHS: Final[dict[Severity, str]] = {
    Severity.ERROR: "✘",
    Severity.WARNING: "⚠",
}


__all__ = ["ENGINE_ERROR", "ENGINE_WARNING", "Severity"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Styling of report fragments by semantic role."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final
from urllib.parse import quote_plus

from ..logging import colorize, hyperlink
from ..severity import Severity

CORE_RULE_DOCS_URL: Final[str] = "https://eslint.org/docs/rules/"
PLUGIN_RULE_SEARCH_URL: Final[str] = "https://www.google.com/search?q="
PLUGIN_RULE_SEPARATOR: Final[str] = "/"
LOCATION_SEPARATOR: Final[str] = " : "


def rule_url(rule_id: str) -> str:
    """Return the documentation URL for ``rule_id``.

    Plugin rules (``plugin/rule``) have no canonical home, so they resolve to
    a web search instead.
    """

    if PLUGIN_RULE_SEPARATOR in rule_id:
        return f"{PLUGIN_RULE_SEARCH_URL}{quote_plus(rule_id)}"
    return f"{CORE_RULE_DOCS_URL}{rule_id}"


@dataclass(frozen=True, slots=True)
class Styler:
    """Apply terminal styling to report fragments.

    Attributes:
        color: Emit ANSI colour codes.
        link_rules: Wrap rule ids in terminal hyperlinks to their documentation.
    """

    color: bool = True
    link_rules: bool = True

    def paint(self, text: str, code: str) -> str:
        return colorize(text, code, self.color)

    def glyph(self, role: Severity) -> str:
        return self.paint(role.glyph, role.color)

    def rule(self, rule_id: str, role: Severity) -> str:
        """Return the bold, role-coloured rule label, linked when enabled."""
        label = self.paint(rule_id, f"bold {role.color}")
        if self.link_rules and rule_id:
            return hyperlink(label, rule_url(rule_id), self.color)
        return label

    def message(self, text: str, role: Severity) -> str:
        return self.paint(text, f"bold {role.color}")

    def heading(self, text: str, role: Severity) -> str:
        return self.paint(text, role.color)

    def location(self, file_path: str, line: int, column: int) -> str:
        return f"{self.paint(file_path, 'bold')}{LOCATION_SEPARATOR}{self.paint(f'{line}:{column}', 'bold green')}"

    def editor_link(self, scheme: str, file_path: str, line: int, column: int) -> str:
        """Expand the ``{file}``, ``{line}`` and ``{column}`` placeholders of ``scheme``."""
        return (
            scheme.replace("{file}", file_path)
            .replace("{line}", self.paint(str(line), "green"))
            .replace("{column}", self.paint(str(column), "cyan"))
        )


__all__ = ["LOCATION_SEPARATOR", "Styler", "rule_url"]

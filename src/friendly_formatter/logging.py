# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing logging helpers with optional colour and emoji support."""

from __future__ import annotations

import sys
from functools import lru_cache

from rich.console import Console
from rich.text import Text

ANSI = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "blue": "\033[34m",
    "cyan": "\033[36m",
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "white": "\033[37m",
}

_OSC_LINK_OPEN = "\033]8;;{url}\033\\"
_OSC_LINK_CLOSE = "\033]8;;\033\\"


def colorize(text: str, code: str, enable: bool) -> str:
    """Apply ANSI colour codes to ``text`` when colouring is enabled.

    Args:
        text: Message text that may be colourised.
        code: Space separated style names from :data:`ANSI` (``"bold red"``).
        enable: Flag indicating whether colour output is requested.

    Returns:
        str: Colourised text when colouring is enabled; otherwise the original text.
    """

    if not enable or not text:
        return text
    prefix = "".join(ANSI.get(name, "") for name in code.split())
    if not prefix:
        return text
    return f"{prefix}{text}{ANSI['reset']}"


def hyperlink(text: str, url: str, enable: bool) -> str:
    """Wrap ``text`` in an OSC-8 terminal hyperlink targeting ``url``."""

    if not enable or not text or not url:
        return text
    return f"{_OSC_LINK_OPEN.format(url=url)}{text}{_OSC_LINK_CLOSE}"


def visible_length(text: str) -> int:
    """Return the terminal cell width of ``text`` ignoring escape sequences.

    Args:
        text: Single line of text that may contain ANSI styling or OSC links.

    Returns:
        int: Number of terminal cells the text occupies once rendered.
    """

    return Text.from_ansi(text).cell_len


def emoji(symbol: str, enable: bool) -> str:
    """Return *symbol* when emoji output is enabled, otherwise blank."""

    return symbol if enable else ""


def stdout_supports_color() -> bool:
    """Return ``True`` when stdout is a terminal that can show ANSI styling."""

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


@lru_cache(maxsize=4)
def status_console(color: bool, emoji: bool) -> Console:
    """Return the console used for status messages.

    The report itself is plain text; only the short status lines printed by
    the command line go through rich. Colour is decided by the caller, so the
    console never inspects the stream on its own.
    """

    return Console(
        color_system="standard" if color else None,
        force_terminal=color,
        no_color=not color,
        emoji=emoji,
        soft_wrap=True,
        highlight=False,
    )


def _print_line(msg: str, *, style: str, use_emoji: bool, use_color: bool) -> None:
    text = Text(msg)
    if use_color:
        text.stylize(style)
    status_console(use_color, use_emoji).print(text)


def ok(msg: str, *, use_emoji: bool, use_color: bool) -> None:
    """Emit a success message."""

    _print_line(f"{emoji('✅ ', use_emoji)}{msg}", style="green", use_emoji=use_emoji, use_color=use_color)


def warn(msg: str, *, use_emoji: bool, use_color: bool) -> None:
    """Emit a warning message."""

    _print_line(f"{emoji('⚠️ ', use_emoji)}{msg}", style="yellow", use_emoji=use_emoji, use_color=use_color)


def fail(msg: str, *, use_emoji: bool, use_color: bool) -> None:
    """Emit an error message."""

    _print_line(f"{emoji('❌ ', use_emoji)}{msg}", style="red", use_emoji=use_emoji, use_color=use_color)


__all__ = [
    "ANSI",
    "colorize",
    "emoji",
    "fail",
    "hyperlink",
    "ok",
    "status_console",
    "stdout_supports_color",
    "visible_length",
    "warn",
]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render configuration and the helpers that build it from the process environment."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Final

import click
from pydantic import BaseModel, ConfigDict, field_validator

ARGS_SEPARATOR: Final[str] = "--"
TRUE_LITERAL: Final[str] = "true"

ENV_ABSOLUTE_PATHS: Final[str] = "EFF_ABSOLUTE_PATHS"
ENV_EDITOR_SCHEME: Final[str] = "EFF_EDITOR_SCHEME"
ENV_NO_LINK_RULES: Final[str] = "EFF_NO_LINK_RULES"
ENV_NO_COLOR: Final[str] = "EFF_NO_COLOR"
ENV_NO_COLOR_STANDARD: Final[str] = "NO_COLOR"

OPT_BY_ISSUE: Final[str] = "--eff-by-issue"
OPT_FILTER: Final[str] = "--eff-filter"


class ConfigError(Exception):
    """Raised when formatter arguments are invalid."""


class RenderConfiguration(BaseModel):
    """Options controlling how a report is sorted, filtered and decorated."""

    model_config = ConfigDict(frozen=True)

    group_by_category: bool = False
    filter_category: str | None = None
    absolute_paths: bool = False
    editor_link_scheme: str | None = None
    link_rules: bool = True
    color: bool = True

    @field_validator("filter_category", "editor_link_scheme", mode="before")
    @classmethod
    def _blank_to_none(cls, value: object) -> object:
        if isinstance(value, str) and not value:
            return None
        return value

    @classmethod
    def from_sources(
        cls,
        argv: Sequence[str] = (),
        env: Mapping[str, str] | None = None,
        *,
        color: bool = True,
    ) -> RenderConfiguration:
        """Build a configuration from formatter arguments and environment variables.

        Args:
            argv: Full process argument vector; only the arguments after the
                first ``--`` token are inspected.
            env: Environment mapping holding the ``EFF_*`` variables.
            color: Whether the output stream supports colour.

        Returns:
            RenderConfiguration: Immutable configuration for a single render.

        Raises:
            ConfigError: If the formatter arguments cannot be parsed.
        """

        environ = env or {}
        group_by_category, filter_category = parse_formatter_args(args_after_separator(argv))
        no_color = parse_bool_env(environ, ENV_NO_COLOR) or bool(environ.get(ENV_NO_COLOR_STANDARD))
        return cls(
            group_by_category=group_by_category,
            filter_category=filter_category,
            absolute_paths=parse_bool_env(environ, ENV_ABSOLUTE_PATHS),
            editor_link_scheme=environ.get(ENV_EDITOR_SCHEME) or None,
            link_rules=not parse_bool_env(environ, ENV_NO_LINK_RULES),
            color=color and not no_color,
        )


def parse_bool_env(env: Mapping[str, str], name: str) -> bool:
    """Return ``True`` only when ``env[name]`` is the literal string ``"true"``."""

    return env.get(name) == TRUE_LITERAL


def args_after_separator(argv: Sequence[str]) -> list[str]:
    """Return the arguments following the first ``--`` token.

    The whole vector is returned when no separator is present.
    """

    args = list(argv)
    if ARGS_SEPARATOR in args:
        return args[args.index(ARGS_SEPARATOR) + 1 :]
    return args


_FORMATTER_ARGS = click.Command(
    "friendly-formatter",
    params=[
        click.Option([OPT_BY_ISSUE, "by_issue"], is_flag=True, default=False),
        click.Option([OPT_FILTER, "filter_rule"], type=str, default=None),
    ],
    context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
    add_help_option=False,
)


def parse_formatter_args(args: Sequence[str]) -> tuple[bool, str | None]:
    """Extract the group-by and filter options from formatter arguments.

    Unknown options and positional values belong to the lint engine and are
    ignored.

    Args:
        args: Arguments addressed to the formatter.

    Returns:
        tuple[bool, str | None]: The group-by-category flag and the rule id
        filter, if any.

    Raises:
        ConfigError: If an option is malformed, e.g. ``--eff-filter`` without a value.
    """

    try:
        ctx = _FORMATTER_ARGS.make_context(_FORMATTER_ARGS.name or "", list(args))
    except click.ClickException as exc:
        raise ConfigError(exc.format_message()) from exc
    filter_rule = ctx.params.get("filter_rule")
    return bool(ctx.params.get("by_issue")), filter_rule or None


__all__ = [
    "ConfigError",
    "ENV_ABSOLUTE_PATHS",
    "ENV_EDITOR_SCHEME",
    "ENV_NO_COLOR",
    "ENV_NO_LINK_RULES",
    "RenderConfiguration",
    "args_after_separator",
    "parse_bool_env",
    "parse_formatter_args",
]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command line front end rendering a lint engine JSON report."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Annotated, Any

import typer

from .config import RenderConfiguration
from .diagnostics import ReportInputError, filter_by_category, flatten_results, load_results
from .logging import fail, ok, stdout_supports_color, warn
from .models import FileResult
from .reporting import render_report
from .severity import Severity

EXIT_OK = 0
EXIT_LINT_ERRORS = 1
EXIT_BAD_INPUT = 2

app = typer.Typer(
    help="Render lint engine JSON output (e.g. `eslint -f json`) as a friendly terminal report.",
    add_completion=False,
)


def _read_report(report: Path | None) -> str:
    if report is None:
        return typer.get_text_stream("stdin").read()
    return report.read_text(encoding="utf-8")


def _has_errors(results: list[FileResult], config: RenderConfiguration) -> bool:
    messages = filter_by_category(flatten_results(results), config.filter_category)
    return any(message.role is Severity.ERROR for message in messages)


@app.command()
def main(
    report: Annotated[
        Path | None,
        typer.Argument(
            help="JSON report to render; read from stdin when omitted.",
            exists=True,
            dir_okay=False,
            readable=True,
        ),
    ] = None,
    by_issue: Annotated[bool, typer.Option("--by-issue", help="Group diagnostics by rule id.")] = False,
    filter_rule: Annotated[
        str | None,
        typer.Option("--filter", metavar="RULE", help="Only report diagnostics raised by RULE."),
    ] = None,
    absolute_paths: Annotated[
        bool,
        typer.Option("--absolute-paths", help="Print absolute file paths."),
    ] = False,
    editor_scheme: Annotated[
        str | None,
        typer.Option(
            "--editor-scheme",
            metavar="TEMPLATE",
            help="Editor link template using {file}, {line} and {column} placeholders.",
        ),
    ] = None,
    no_link_rules: Annotated[
        bool,
        typer.Option("--no-link-rules", help="Do not hyperlink rule ids to their documentation."),
    ] = False,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable ANSI colours.")] = False,
    use_emoji: Annotated[bool, typer.Option("--emoji/--no-emoji", help="Decorate status messages.")] = True,
    fail_on_error: Annotated[
        bool,
        typer.Option("--fail-on-error", help="Exit with status 1 when the report contains errors."),
    ] = False,
) -> None:
    """Render a JSON lint report.

    Options override the ``EFF_*`` environment variables.
    """

    base = RenderConfiguration.from_sources((), os.environ, color=stdout_supports_color())
    overrides: dict[str, Any] = {}
    if by_issue:
        overrides["group_by_category"] = True
    if filter_rule:
        overrides["filter_category"] = filter_rule
    if absolute_paths:
        overrides["absolute_paths"] = True
    if editor_scheme:
        overrides["editor_link_scheme"] = editor_scheme
    if no_link_rules:
        overrides["link_rules"] = False
    if no_color:
        overrides["color"] = False
    config = base.model_copy(update=overrides)

    try:
        results = load_results(_read_report(report))
    except (OSError, UnicodeDecodeError, ReportInputError) as exc:
        fail(f"Unable to read lint report: {exc}", use_emoji=use_emoji, use_color=config.color)
        raise typer.Exit(code=EXIT_BAD_INPUT) from exc

    output = render_report(results, config)
    if output:
        typer.echo(output)
    elif config.filter_category and any(result.messages for result in results):
        warn(f"No problems matched rule '{config.filter_category}'", use_emoji=use_emoji, use_color=config.color)
    else:
        ok("No problems found", use_emoji=use_emoji, use_color=config.color)

    if fail_on_error and _has_errors(results, config):
        raise typer.Exit(code=EXIT_LINT_ERRORS)
    raise typer.Exit(code=EXIT_OK)


__all__ = ["app", "main"]

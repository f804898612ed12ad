# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""End-to-end tests for report composition."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import pytest
from pydantic import ValidationError

from friendly_formatter.config import RenderConfiguration
from friendly_formatter.models import FileResult
from friendly_formatter.reporting.formatter import REPORT_SEPARATOR, format_results, render_report

ResultFactory = Callable[..., FileResult]
PayloadFactory = Callable[..., dict[str, Any]]


def _rendered_locations(report: str) -> list[str]:
    return [line.strip() for line in report.splitlines() if " : " in line]


def test_single_error_report(
    make_result: ResultFactory,
    payload: PayloadFactory,
    plain_config: RenderConfiguration,
) -> None:
    results = [make_result("src/app.js", payload(line=3, column=16, source="var answer = 42"))]

    report = render_report(results, plain_config)

    assert report == (
        "\n"
        "  ✘  semi  Missing semicolon\n"
        "  src/app.js : 3:16\n"
        "  var answer = 42\n"
        "                 ^\n"
        "\n"
        "✘ 1 problem (1 error, 0 warnings)\n"
        "\n"
        "Errors:\n"
        "  1  semi\n"
        "\n" + "=" * 58
    )


def test_report_ends_with_separator(
    make_result: ResultFactory,
    payload: PayloadFactory,
    plain_config: RenderConfiguration,
) -> None:
    report = render_report([make_result("a.js", payload(severity=1))], plain_config)

    assert report.startswith("\n")
    assert report.endswith(f"\n\n{REPORT_SEPARATOR}")
    assert "1 problem (0 errors, 1 warning)" in report
    assert "Warnings:" in report
    assert "Errors:" not in report


@pytest.mark.parametrize("results", [None, [], "empty"])
def test_nothing_to_report(
    results: object,
    make_result: ResultFactory,
    plain_config: RenderConfiguration,
) -> None:
    if results == "empty":
        results = [make_result("a.js"), FileResult.model_validate({"filePath": "b.js", "messages": None})]

    assert render_report(results, plain_config) == ""  # type: ignore[arg-type]


def test_filter_removing_everything_yields_empty_string(
    make_result: ResultFactory,
    payload: PayloadFactory,
) -> None:
    results = [make_result("a.js", payload(ruleId="semi"))]

    assert render_report(results, RenderConfiguration(color=False, filter_category="quotes")) == ""


def test_filter_restricts_rows_counts_and_summary(
    make_result: ResultFactory,
    payload: PayloadFactory,
) -> None:
    results = [
        make_result(
            "a.js",
            payload(ruleId="no-unused-vars", severity=2, message="'a' is defined but never used."),
            payload(ruleId="semi", severity=2),
            payload(ruleId=None, severity=2, fatal=True, message="Parsing error: Unexpected token"),
        ),
        make_result("b.js", payload(ruleId="no-unused-vars", severity=1, message="'b' is assigned but unused.")),
    ]

    report = render_report(results, RenderConfiguration(color=False, filter_category="no-unused-vars"))

    assert "2 problems (1 error, 1 warning)" in report
    assert "semi" not in report
    assert "Parsing error" not in report
    assert report.count("no-unused-vars") == 4
    assert "Errors:\n  1  no-unused-vars" in report
    assert "Warnings:\n  1  no-unused-vars" in report


def test_row_count_matches_problem_count(
    make_result: ResultFactory,
    payload: PayloadFactory,
    plain_config: RenderConfiguration,
) -> None:
    results = [
        make_result("a.js", payload(), payload(severity=1, ruleId="quotes"), payload(ruleId=None)),
        make_result("b.js", payload(line=7, source="x()")),
    ]

    report = render_report(results, plain_config)

    assert len(_rendered_locations(report)) == 4
    assert "4 problems (3 errors, 1 warning)" in report


def test_input_order_does_not_change_report(
    make_result: ResultFactory,
    payload: PayloadFactory,
    plain_config: RenderConfiguration,
) -> None:
    first = make_result("lib/a.js", payload(line=4), payload(line=1, severity=1, ruleId="quotes"))
    second = make_result("lib/b.js", payload(line=2, ruleId="eqeqeq"))
    third = make_result("app.js", payload(line=9, column=3))

    forward = render_report([first, second, third], plain_config)
    backward = render_report([third, second, first], plain_config)

    assert forward == backward
    assert _rendered_locations(forward) == [
        "lib/a.js : 1:1",
        "app.js : 9:3",
        "lib/a.js : 4:1",
        "lib/b.js : 2:1",
    ]


def test_group_by_category_places_same_rule_together(
    make_result: ResultFactory,
    payload: PayloadFactory,
) -> None:
    results = [
        make_result("a.js", payload(ruleId="semi")),
        make_result("b.js", payload(ruleId="eqeqeq")),
        make_result("c.js", payload(ruleId="semi")),
    ]

    grouped = render_report(results, RenderConfiguration(color=False, group_by_category=True))
    by_path = render_report(results, RenderConfiguration(color=False))

    assert _rendered_locations(grouped) == ["b.js : 1:1", "a.js : 1:1", "c.js : 1:1"]
    assert _rendered_locations(by_path) == ["a.js : 1:1", "b.js : 1:1", "c.js : 1:1"]


def test_summary_tables_rank_by_count(
    make_result: ResultFactory,
    payload: PayloadFactory,
    plain_config: RenderConfiguration,
) -> None:
    results = [
        make_result("a.js", payload(ruleId="semi"), payload(ruleId="quotes", line=2), payload(ruleId="quotes", line=3)),
    ]

    report = render_report(results, plain_config)

    assert "Errors:\n  2  quotes\n  1  semi" in report


def test_absolute_paths_use_resolver_without_touching_input(
    make_result: ResultFactory,
    payload: PayloadFactory,
) -> None:
    results = [make_result("src/app.js", payload())]

    report = render_report(
        results,
        RenderConfiguration(color=False, absolute_paths=True),
        resolve_path=lambda path: f"/srv/project/{path}",
    )

    assert "/srv/project/src/app.js : 1:1" in report
    assert results[0].file_path == "src/app.js"
    assert results[0].messages[0].file_path is None


def test_editor_link_line(make_result: ResultFactory, payload: PayloadFactory) -> None:
    config = RenderConfiguration(color=False, editor_link_scheme="vscode://file/{file}:{line}:{column}")

    report = render_report([make_result("src/app.js", payload(line=3, column=7))], config)

    assert "  src/app.js : 3:7\n  vscode://file/src/app.js:3:7\n" in report


def test_accepts_decoded_json_mappings(plain_config: RenderConfiguration) -> None:
    results = [
        {
            "filePath": "a.js",
            "messages": [{"ruleId": "semi", "severity": 1, "message": "Extra semicolon.", "line": 1, "column": 5}],
            "errorCount": 0,
            "warningCount": 1,
        },
    ]

    report = render_report(results, plain_config)

    assert "⚠  semi  Extra semicolon" in report


def test_malformed_mapping_is_rejected(plain_config: RenderConfiguration) -> None:
    with pytest.raises(ValidationError):
        render_report([{"filePath": "a.js", "messages": [{"ruleId": "semi"}]}], plain_config)


def test_coloured_report_contains_ansi(
    make_result: ResultFactory,
    payload: PayloadFactory,
) -> None:
    report = render_report([make_result("a.js", payload())], RenderConfiguration())

    assert "\033[31m" in report
    assert "\033[1m\033[31m✘ 1 problem (1 error, 0 warnings)\033[0m" in report


def test_format_results_reads_argv_and_environment(
    make_result: ResultFactory,
    payload: PayloadFactory,
) -> None:
    results = [make_result("a.js", payload(ruleId="semi")), make_result("b.js", payload(ruleId="quotes"))]

    report = format_results(
        results,
        argv=["node", "eslint", ".", "--", "--eff-filter", "quotes"],
        env={"EFF_EDITOR_SCHEME": "open://{file}#{line}"},
        color=False,
    )

    assert "1 problem (1 error, 0 warnings)" in report
    assert "open://b.js#1" in report
    assert "a.js" not in report


def test_format_results_defaults_to_process_state(
    make_result: ResultFactory,
    payload: PayloadFactory,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr("sys.argv", ["eslint", "--", "--eff-by-issue"])
    monkeypatch.setenv("EFF_ABSOLUTE_PATHS", "false")

    report = format_results([make_result("a.js", payload())], color=False)

    assert "a.js : 1:1" in report


def test_format_results_falls_back_to_defaults_on_bad_arguments(
    make_result: ResultFactory,
    payload: PayloadFactory,
    caplog: pytest.LogCaptureFixture,
) -> None:
    results = [make_result("a.js", payload(ruleId="semi")), make_result("b.js", payload(ruleId="quotes"))]

    with caplog.at_level(logging.WARNING, logger="friendly_formatter.reporting.formatter"):
        report = format_results(
            results,
            argv=["eslint", "--", "--eff-by-issue=true"],
            env={"EFF_EDITOR_SCHEME": "open://{file}#{line}"},
            color=False,
        )

    assert "2 problems (2 errors, 0 warnings)" in report
    assert "open://a.js#1" in report
    assert "ignoring formatter arguments" in caplog.text
    assert "--eff-by-issue" in caplog.text

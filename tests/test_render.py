"""Report rendering stories: value formatting, human lines, and JSON output."""

from __future__ import annotations

import json

import pytest

from fnexercises.adapters.report.render import format_call, format_plain, format_value, render_human, render_json
from fnexercises.application.runner import RunReport, run_case, run_samples
from fnexercises.domain.enums import CheckKind
from fnexercises.domain.samples import SAMPLE_CASES, SampleCase


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (True, "true"),
        (False, "false"),
        (14, "14"),
        (10.0, "10.0"),
        ("COMPUTER", '"COMPUTER"'),
        ('say "hi"', '"say \\"hi\\""'),
        ((1, 10), "[1, 10]"),
    ],
)
def test_format_value_renders_literals(value: object, expected: str) -> None:
    assert format_value(value) == expected


@pytest.mark.os_agnostic
def test_format_plain_prints_strings_without_quotes() -> None:
    assert format_plain("3 6 9") == "3 6 9"
    assert format_plain(True) == "true"


@pytest.mark.os_agnostic
def test_format_call_quotes_string_arguments() -> None:
    assert format_call(SampleCase("is-strong", ("Abc12345",), True)) == 'is-strong("Abc12345")'


@pytest.mark.os_agnostic
def test_human_report_has_one_line_per_case_plus_summary() -> None:
    report = run_samples()

    lines = render_human(report).splitlines()

    assert len(lines) == len(SAMPLE_CASES) + 1
    assert lines[-1] == f"{len(SAMPLE_CASES)} passed, 0 failed, {len(SAMPLE_CASES)} total"
    assert 'PASS  table-row(5, 4) -> "5 10 15 20"' in lines


@pytest.mark.os_agnostic
def test_human_report_shows_expectation_for_failures() -> None:
    report = RunReport(results=(run_case(SampleCase("double-num", (2,), 5)),))

    first_line = render_human(report).splitlines()[0]

    assert first_line == "FAIL  double-num(2) -> 4 (expected 5)"


@pytest.mark.os_agnostic
def test_human_report_shows_bounds_for_failed_range_check() -> None:
    case = SampleCase("random-between", (20, 20), (1, 10), CheckKind.WITHIN_BOUNDS)

    first_line = render_human(RunReport(results=(run_case(case),))).splitlines()[0]

    assert first_line.endswith("-> 20 (expected in [1, 10])")


@pytest.mark.os_agnostic
def test_human_report_shows_error_message() -> None:
    report = RunReport(results=(run_case(SampleCase("table-row", (7, 0), "7")),))

    first_line = render_human(report).splitlines()[0]

    assert first_line.startswith("ERROR table-row(7, 0) !! ")
    assert "count >= 1" in first_line


@pytest.mark.os_agnostic
def test_json_report_lists_cases_and_summary() -> None:
    report = run_samples(only={"average"})

    document = json.loads(render_json(report))

    assert document["summary"] == {"passed": 3, "failed": 0, "total": 3}
    assert [case["args"] for case in document["cases"]] == [[4, 10, 6], [1, 1, 1], [0, 10, 20]]
    assert document["cases"][0]["check"] == "approx"
    assert document["cases"][0]["status"] == "pass"
    assert document["cases"][0]["error"] is None

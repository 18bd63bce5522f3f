"""Text and JSON renderings of a :class:`RunReport`.

Contents:
    * :func:`format_value` - literal-style rendering of a single value.
    * :func:`format_plain` - bare rendering used for single ``call`` results.
    * :func:`format_call` - ``name(arg, ...)`` rendering of a sample case.
    * :func:`render_human` - one line per case plus a summary line.
    * :func:`render_json` - orjson document with cases and summary.
"""

from __future__ import annotations

from typing import Any

import orjson

from fnexercises.application.runner import CaseResult, RunReport
from fnexercises.domain.enums import CaseStatus, CheckKind
from fnexercises.domain.samples import SampleCase

_STATUS_WIDTH = max(len(status.value) for status in CaseStatus) + 1


def format_value(value: Any) -> str:
    """Render ``value`` the way it would be written as a literal argument.

    Examples:
        >>> format_value(True)
        'true'
        >>> format_value("5 10")
        '"5 10"'
        >>> format_value(20 / 3)
        '6.666666666666667'
        >>> format_value((1, 10))
        '[1, 10]'
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return orjson.dumps(value).decode()
    if isinstance(value, float):
        return repr(value)
    if isinstance(value, (tuple, list)):
        return "[" + ", ".join(format_value(item) for item in value) + "]"
    return str(value)


def format_plain(value: Any) -> str:
    """Render a result for direct printing; strings appear without quotes.

    Examples:
        >>> format_plain("5 10 15 20")
        '5 10 15 20'
        >>> format_plain(False)
        'false'
    """
    if isinstance(value, str):
        return value
    return format_value(value)


def format_call(case: SampleCase) -> str:
    """Render ``case`` as a call expression.

    Example:
        >>> format_call(SampleCase("table-row", (5, 4), "5 10 15 20"))
        'table-row(5, 4)'
    """
    return f"{case.exercise}({', '.join(format_value(arg) for arg in case.args)})"


def _format_expectation(case: SampleCase) -> str:
    if case.check is CheckKind.WITHIN_BOUNDS:
        low, high = case.expected
        return f"in [{low}, {high}]"
    if case.check is CheckKind.APPROX:
        return f"~{format_value(case.expected)}"
    return format_value(case.expected)


def _format_line(result: CaseResult) -> str:
    label = result.status.value.upper().ljust(_STATUS_WIDTH)
    call = format_call(result.case)
    if result.status is CaseStatus.ERROR:
        return f"{label}{call} !! {result.error}"
    line = f"{label}{call} -> {format_value(result.actual)}"
    if result.status is CaseStatus.FAILED:
        line += f" (expected {_format_expectation(result.case)})"
    return line


def render_human(report: RunReport) -> str:
    """Render one line per case in run order, followed by a summary line.

    Example:
        >>> from fnexercises.application.runner import run_case
        >>> report = RunReport(results=(run_case(SampleCase("count-vowels", ("XYZ",), 0)),))
        >>> print(render_human(report))
        PASS  count-vowels("XYZ") -> 0
        1 passed, 0 failed, 1 total
    """
    lines = [_format_line(result) for result in report.results]
    lines.append(f"{report.passed} passed, {report.failed} failed, {report.total} total")
    return "\n".join(lines)


def render_json(report: RunReport) -> str:
    """Render ``report`` as an indented JSON document.

    Example:
        >>> import json
        >>> from fnexercises.application.runner import run_case
        >>> report = RunReport(results=(run_case(SampleCase("max", (4, 4), 4)),))
        >>> json.loads(render_json(report))["summary"]
        {'passed': 1, 'failed': 0, 'total': 1}
    """
    document = {
        "cases": [
            {
                "exercise": result.case.exercise,
                "args": list(result.case.args),
                "check": result.case.check.value,
                "expected": result.case.expected,
                "actual": result.actual,
                "status": result.status.value,
                "error": result.error,
            }
            for result in report.results
        ],
        "summary": {"passed": report.passed, "failed": report.failed, "total": report.total},
    }
    return orjson.dumps(document, option=orjson.OPT_INDENT_2).decode()


__all__ = [
    "format_call",
    "format_plain",
    "format_value",
    "render_human",
    "render_json",
]

"""Domain enum tests: member values, string equality, and exhaustive member counts."""

from __future__ import annotations

import pytest

from fnexercises.domain.enums import CaseStatus, CheckKind, OutputFormat


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("member", "expected_value"),
    [
        (OutputFormat.HUMAN, "human"),
        (OutputFormat.JSON, "json"),
        (CheckKind.EQUALS, "equals"),
        (CheckKind.APPROX, "approx"),
        (CheckKind.WITHIN_BOUNDS, "within-bounds"),
        (CaseStatus.PASSED, "pass"),
        (CaseStatus.FAILED, "fail"),
        (CaseStatus.ERROR, "error"),
    ],
)
def test_enum_members_compare_equal_to_their_values(member: str, expected_value: str) -> None:
    assert member == expected_value


@pytest.mark.os_agnostic
@pytest.mark.parametrize(("enum_cls", "count"), [(OutputFormat, 2), (CheckKind, 3), (CaseStatus, 3)])
def test_enum_member_counts(enum_cls: type, count: int) -> None:
    assert len(enum_cls) == count  # type: ignore[arg-type]

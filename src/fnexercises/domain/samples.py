"""Literal sample invocations with their expected results.

The tuple order is the order in which the runner reports cases.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .enums import CheckKind


@dataclass(frozen=True, slots=True)
class SampleCase:
    """A literal call of one exercise and the value it should produce.

    For :attr:`CheckKind.WITHIN_BOUNDS` the ``expected`` value is an
    inclusive ``(low, high)`` pair.
    """

    exercise: str
    args: tuple[Any, ...]
    expected: Any
    check: CheckKind = CheckKind.EQUALS


SAMPLE_CASES: tuple[SampleCase, ...] = (
    SampleCase("double-num", (7,), 14),
    SampleCase("double-num", (-3,), -6),
    SampleCase("last-char", ("Python",), "n"),
    SampleCase("max", (8, 3), 8),
    SampleCase("max", (4, 4), 4),
    SampleCase("abs", (-9,), 9),
    SampleCase("abs", (5,), 5),
    SampleCase("count-vowels", ("COMPUTER",), 3),
    SampleCase("count-vowels", ("AEIOU",), 5),
    SampleCase("count-vowels", ("XYZ",), 0),
    SampleCase("table-row", (5, 4), "5 10 15 20"),
    SampleCase("table-row", (3, 6), "3 6 9 12 15 18"),
    SampleCase("table-row", (7, 1), "7"),
    SampleCase("random-between", (5, 5), 5),
    SampleCase("random-between", (1, 10), (1, 10), CheckKind.WITHIN_BOUNDS),
    SampleCase("contains-digit", (4829, 8), True),
    SampleCase("contains-digit", (4829, 7), False),
    SampleCase("contains-digit", (1001, 0), True),
    SampleCase("average", (4, 10, 6), 6.6666666667, CheckKind.APPROX),
    SampleCase("average", (1, 1, 1), 1.0),
    SampleCase("average", (0, 10, 20), 10.0),
    SampleCase("is-strong", ("Abc12345",), True),
    SampleCase("is-strong", ("weakpass",), False),
    SampleCase("is-strong", ("A1b2C3",), False),
)


__all__ = ["SAMPLE_CASES", "SampleCase"]

"""Type-safe domain enums for output formats and sample case checks."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format options for configuration display and run reports.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Human-readable output, one line per entry.
        JSON: Machine-readable JSON output format.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


class CheckKind(str, Enum):
    """How a sample case compares the actual result to its expectation.

    Attributes:
        EQUALS: Exact equality.
        APPROX: Floating-point closeness within the configured tolerance.
        WITHIN_BOUNDS: Expected value is an inclusive ``(low, high)`` pair.

    Example:
        >>> CheckKind.WITHIN_BOUNDS.value
        'within-bounds'
    """

    EQUALS = "equals"
    APPROX = "approx"
    WITHIN_BOUNDS = "within-bounds"


class CaseStatus(str, Enum):
    """Outcome of one sample case.

    Attributes:
        PASSED: Exercise returned a value satisfying the check.
        FAILED: Exercise returned a value that does not satisfy the check.
        ERROR: Exercise raised instead of returning.

    Example:
        >>> CaseStatus.PASSED == "pass"
        True
    """

    PASSED = "pass"
    FAILED = "fail"
    ERROR = "error"


__all__ = [
    "CaseStatus",
    "CheckKind",
    "OutputFormat",
]

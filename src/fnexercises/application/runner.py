"""Sample runner use case: invoke exercises and compare against expectations.

Contents:
    * :class:`CaseResult` - outcome of one sample case.
    * :class:`RunReport` - ordered results with pass/fail counters.
    * :func:`check_result` - apply a case's comparison rule.
    * :func:`run_case` - run a single case, capturing precondition failures.
    * :func:`run_samples` - run a sequence of cases in order.

System Role:
    Orchestrates domain objects only. Randomness arrives as an optional
    ``random.Random`` so callers control seeding; rendering and exit codes
    belong to the CLI adapter.
"""

from __future__ import annotations

import logging
import math
import random
from collections.abc import Collection, Sequence
from dataclasses import dataclass
from typing import Any, Final

from ..domain.catalog import get_exercise, invoke
from ..domain.enums import CaseStatus, CheckKind
from ..domain.samples import SAMPLE_CASES, SampleCase

logger = logging.getLogger(__name__)

#: Absolute tolerance used for :attr:`CheckKind.APPROX` when none is configured.
DEFAULT_FLOAT_TOLERANCE: Final[float] = 1e-9


@dataclass(frozen=True, slots=True)
class CaseResult:
    """Outcome of running one :class:`SampleCase`."""

    case: SampleCase
    status: CaseStatus
    actual: Any = None
    error: str | None = None

    @property
    def passed(self) -> bool:
        return self.status is CaseStatus.PASSED


@dataclass(frozen=True, slots=True)
class RunReport:
    """Ordered case results plus summary counters.

    Example:
        >>> report = run_samples()
        >>> report.total == len(SAMPLE_CASES)
        True
        >>> report.all_passed
        True
    """

    results: tuple[CaseResult, ...]

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def passed(self) -> int:
        return sum(1 for result in self.results if result.passed)

    @property
    def failed(self) -> int:
        return self.total - self.passed

    @property
    def all_passed(self) -> bool:
        return self.failed == 0


def check_result(case: SampleCase, actual: Any, *, tolerance: float = DEFAULT_FLOAT_TOLERANCE) -> bool:
    """Return whether ``actual`` satisfies ``case`` according to its check kind.

    ``EQUALS`` also requires matching types so ``True`` never passes for ``1``.

    Example:
        >>> from fnexercises.domain.samples import SampleCase
        >>> check_result(SampleCase("average", (4, 10, 6), 6.6666666667, CheckKind.APPROX), 20 / 3)
        True
        >>> check_result(SampleCase("contains-digit", (1, 1), True), 1)
        False
    """
    if case.check is CheckKind.APPROX:
        return isinstance(actual, (int, float)) and math.isclose(actual, case.expected, rel_tol=0.0, abs_tol=tolerance)
    if case.check is CheckKind.WITHIN_BOUNDS:
        low, high = case.expected
        return isinstance(actual, int) and low <= actual <= high
    return type(actual) is type(case.expected) and actual == case.expected


def run_case(
    case: SampleCase,
    *,
    rng: random.Random | None = None,
    tolerance: float = DEFAULT_FLOAT_TOLERANCE,
) -> CaseResult:
    """Invoke one sample case and classify the outcome.

    Precondition failures raised by the exercise become
    :attr:`CaseStatus.ERROR` results instead of propagating.
    """
    exercise = get_exercise(case.exercise)
    try:
        actual = invoke(exercise, case.args, rng=rng)
    except (ValueError, TypeError, ArithmeticError) as exc:
        logger.warning(
            "Sample case raised",
            extra={"exercise": case.exercise, "call_args": repr(case.args), "error": str(exc)},
        )
        return CaseResult(case=case, status=CaseStatus.ERROR, error=str(exc))

    status = CaseStatus.PASSED if check_result(case, actual, tolerance=tolerance) else CaseStatus.FAILED
    if status is CaseStatus.FAILED:
        logger.warning(
            "Sample case failed",
            extra={"exercise": case.exercise, "expected": repr(case.expected), "actual": repr(actual)},
        )
    else:
        logger.debug("Sample case passed", extra={"exercise": case.exercise, "call_args": repr(case.args)})
    return CaseResult(case=case, status=status, actual=actual)


def run_samples(
    cases: Sequence[SampleCase] = SAMPLE_CASES,
    *,
    rng: random.Random | None = None,
    tolerance: float = DEFAULT_FLOAT_TOLERANCE,
    only: Collection[str] | None = None,
) -> RunReport:
    """Run ``cases`` in order and collect a :class:`RunReport`.

    Args:
        cases: Sample cases to run. Defaults to :data:`SAMPLE_CASES`.
        rng: Random source forwarded to exercises that draw random numbers.
            ``None`` uses the process-wide source.
        tolerance: Absolute tolerance for approximate float checks.
        only: Optional exercise names to restrict the run to. A single
            name may be passed as a plain string.

    Raises:
        UnknownExerciseError: If ``only`` names an exercise that does not
            exist. Raised before any case runs.
    """
    if isinstance(only, str):
        only = {only}
    if only:
        for name in only:
            get_exercise(name)
        cases = [case for case in cases if case.exercise in only]

    results = tuple(run_case(case, rng=rng, tolerance=tolerance) for case in cases)
    report = RunReport(results=results)
    logger.info(
        "Sample run finished",
        extra={"passed": report.passed, "failed": report.failed, "total": report.total},
    )
    return report


__all__ = [
    "DEFAULT_FLOAT_TOLERANCE",
    "CaseResult",
    "RunReport",
    "check_result",
    "run_case",
    "run_samples",
]

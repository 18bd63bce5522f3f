"""Application layer - use cases and port definitions.

Contains use cases that orchestrate domain logic and port protocols that
define the interfaces for adapter implementations.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
    * :mod:`.runner` - Sample runner use case
"""

from __future__ import annotations

from .ports import (
    DisplayConfig,
    GetConfig,
    InitLogging,
    MakeRandom,
)
from .runner import CaseResult, RunReport, check_result, run_case, run_samples

__all__ = [
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "MakeRandom",
    "CaseResult",
    "RunReport",
    "check_result",
    "run_case",
    "run_samples",
]

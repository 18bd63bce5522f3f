"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.exercises` - The ten value-returning exercise functions
    * :mod:`.catalog` - Name-to-function mapping with parameter metadata
    * :mod:`.samples` - Literal sample invocations and expectations
    * :mod:`.enums` - Domain enumerations (OutputFormat, CheckKind, CaseStatus)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .catalog import EXERCISES, Exercise, get_exercise, invoke, parse_arguments
from .enums import CaseStatus, CheckKind, OutputFormat
from .errors import ConfigurationError, InvalidArgumentError, UnknownExerciseError
from .exercises import (
    absolute,
    average,
    contains_digit,
    count_vowels,
    double_num,
    is_strong,
    last_char,
    max_of_two,
    random_between,
    table_row,
)
from .samples import SAMPLE_CASES, SampleCase

__all__ = [
    # Exercises
    "absolute",
    "average",
    "contains_digit",
    "count_vowels",
    "double_num",
    "is_strong",
    "last_char",
    "max_of_two",
    "random_between",
    "table_row",
    # Catalog
    "EXERCISES",
    "Exercise",
    "get_exercise",
    "invoke",
    "parse_arguments",
    # Samples
    "SAMPLE_CASES",
    "SampleCase",
    # Enums
    "CaseStatus",
    "CheckKind",
    "OutputFormat",
    # Errors
    "ConfigurationError",
    "InvalidArgumentError",
    "UnknownExerciseError",
]

"""Value-returning function exercises with a sample runner.

Public surface:
- Domain exports: the ten exercise functions and the catalog
- Application exports: the sample runner
- Composition exports: configuration loading
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Application exports
from .application.runner import RunReport, run_samples

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.catalog import EXERCISES, get_exercise
from .domain.errors import InvalidArgumentError, UnknownExerciseError
from .domain.exercises import (
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

__all__ = [
    "EXERCISES",
    "InvalidArgumentError",
    "RunReport",
    "UnknownExerciseError",
    "absolute",
    "average",
    "contains_digit",
    "count_vowels",
    "double_num",
    "get_config",
    "get_exercise",
    "is_strong",
    "last_char",
    "max_of_two",
    "print_info",
    "random_between",
    "run_samples",
    "table_row",
]

"""Exercise catalog mapping names to functions and their parameter metadata.

Contents:
    * :class:`Exercise` - name, callable, and typed parameter list.
    * :data:`EXERCISES` - read-only mapping in canonical order.
    * :func:`get_exercise` - lookup raising :class:`UnknownExerciseError`.
    * :func:`parse_arguments` - convert textual arguments to parameter types.
    * :func:`invoke` - call an exercise, forwarding a random source when used.
"""

from __future__ import annotations

import random
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from . import exercises
from .errors import InvalidArgumentError, UnknownExerciseError

Param = tuple[str, type]
"""A parameter as ``(name, type)``; types are ``int`` or ``str``."""


@dataclass(frozen=True, slots=True)
class Exercise:
    """One catalog entry.

    Example:
        >>> entry = get_exercise("table-row")
        >>> entry.signature
        'table-row(base: int, count: int) -> str'
    """

    name: str
    func: Callable[..., Any]
    params: tuple[Param, ...]
    returns: type
    summary: str
    uses_random: bool = False

    @property
    def arity(self) -> int:
        return len(self.params)

    @property
    def signature(self) -> str:
        rendered = ", ".join(f"{pname}: {ptype.__name__}" for pname, ptype in self.params)
        return f"{self.name}({rendered}) -> {self.returns.__name__}"


_ENTRIES: tuple[Exercise, ...] = (
    Exercise("double-num", exercises.double_num, (("n", int),), int, "Twice the given number"),
    Exercise("last-char", exercises.last_char, (("s", str),), str, "Final character of a non-empty string"),
    Exercise("max", exercises.max_of_two, (("a", int), ("b", int)), int, "Greater of two integers"),
    Exercise("abs", exercises.absolute, (("n", int),), int, "Absolute value computed by comparison"),
    Exercise("count-vowels", exercises.count_vowels, (("s", str),), int, "Number of A/E/I/O/U in an uppercase string"),
    Exercise(
        "table-row",
        exercises.table_row,
        (("base", int), ("count", int)),
        str,
        "First COUNT multiples of BASE separated by spaces",
    ),
    Exercise(
        "random-between",
        exercises.random_between,
        (("low", int), ("high", int)),
        int,
        "Uniform random integer in [LOW, HIGH]",
        uses_random=True,
    ),
    Exercise(
        "contains-digit",
        exercises.contains_digit,
        (("number", int), ("digit", int)),
        bool,
        "Whether NUMBER contains DIGIT (sign ignored)",
    ),
    Exercise("average", exercises.average, (("a", int), ("b", int), ("c", int)), float, "Mean of three integers"),
    Exercise(
        "is-strong",
        exercises.is_strong,
        (("pw", str),),
        bool,
        "At least 8 chars with an ASCII digit and uppercase letter",
    ),
)

EXERCISES: Mapping[str, Exercise] = MappingProxyType({entry.name: entry for entry in _ENTRIES})


def get_exercise(name: str) -> Exercise:
    """Return the catalog entry registered under ``name``.

    Raises:
        UnknownExerciseError: If no exercise has that name.

    Example:
        >>> get_exercise("max").func(2, 9)
        9
    """
    try:
        return EXERCISES[name]
    except KeyError:
        choices = ", ".join(EXERCISES)
        raise UnknownExerciseError(f"Unknown exercise {name!r}. Choose from: {choices}") from None


def parse_arguments(exercise: Exercise, raw_args: Sequence[str]) -> tuple[Any, ...]:
    """Convert textual arguments to the exercise's declared parameter types.

    Raises:
        InvalidArgumentError: On wrong argument count or unparsable integers.

    Example:
        >>> parse_arguments(get_exercise("table-row"), ["5", "4"])
        (5, 4)
        >>> parse_arguments(get_exercise("last-char"), ["hello"])
        ('hello',)
    """
    if len(raw_args) != exercise.arity:
        raise InvalidArgumentError(
            f"{exercise.name} expects {exercise.arity} argument(s), got {len(raw_args)}: {exercise.signature}"
        )
    parsed: list[Any] = []
    for (pname, ptype), raw in zip(exercise.params, raw_args):
        if ptype is int:
            try:
                parsed.append(int(raw))
            except ValueError:
                raise InvalidArgumentError(f"{exercise.name}: {pname} must be an integer, got {raw!r}") from None
        else:
            parsed.append(raw)
    return tuple(parsed)


def invoke(exercise: Exercise, args: Sequence[Any], *, rng: random.Random | None = None) -> Any:
    """Call ``exercise`` with ``args``; ``rng`` reaches only exercises that draw random numbers.

    Example:
        >>> invoke(get_exercise("average"), (1, 1, 1))
        1.0
    """
    if exercise.uses_random:
        return exercise.func(*args, rng=rng)
    return exercise.func(*args)


__all__ = [
    "EXERCISES",
    "Exercise",
    "Param",
    "get_exercise",
    "invoke",
    "parse_arguments",
]

"""Pure exercise functions with no I/O or framework dependencies.

Each function returns a value computed only from its arguments.
Precondition violations raise :class:`InvalidArgumentError` at the call
site; nothing is retried or recovered here.

Contents:
    * :func:`double_num`, :func:`last_char`, :func:`max_of_two`,
      :func:`absolute`, :func:`count_vowels`, :func:`table_row`,
      :func:`random_between`, :func:`contains_digit`, :func:`average`,
      :func:`is_strong`.
"""

from __future__ import annotations

import random
import string
from typing import Final

from .errors import InvalidArgumentError

VOWELS: Final[frozenset[str]] = frozenset("AEIOU")

#: Minimum password length accepted by :func:`is_strong`.
MIN_STRONG_LENGTH: Final[int] = 8

_ASCII_DIGITS: Final[frozenset[str]] = frozenset(string.digits)
_ASCII_UPPERCASE: Final[frozenset[str]] = frozenset(string.ascii_uppercase)


def double_num(n: int) -> int:
    """Return twice ``n``.

    Example:
        >>> double_num(21)
        42
        >>> double_num(-3)
        -6
    """
    return 2 * n


def last_char(s: str) -> str:
    """Return the final character of ``s``.

    Raises:
        InvalidArgumentError: If ``s`` is empty.

    Example:
        >>> last_char("Python")
        'n'
    """
    if not s:
        raise InvalidArgumentError("last_char requires a non-empty string")
    return s[-1]


def max_of_two(a: int, b: int) -> int:
    """Return the greater of ``a`` and ``b`` (``a`` when they are equal).

    Example:
        >>> max_of_two(3, 8)
        8
        >>> max_of_two(4, 4)
        4
    """
    return a if a >= b else b


def absolute(n: int) -> int:
    """Return the absolute value of ``n`` using a comparison.

    Example:
        >>> absolute(-9)
        9
        >>> absolute(5)
        5
    """
    return n if n >= 0 else -n


def count_vowels(s: str) -> int:
    """Count the uppercase vowels (A, E, I, O, U) in ``s``.

    Input is expected in uppercase; lowercase letters are not vowels here.

    Example:
        >>> count_vowels("COMPUTER")
        3
    """
    return sum(1 for ch in s if ch in VOWELS)


def table_row(base: int, count: int) -> str:
    """Return the first ``count`` multiples of ``base`` joined by single spaces.

    Raises:
        InvalidArgumentError: If ``count`` is smaller than 1.

    Example:
        >>> table_row(5, 4)
        '5 10 15 20'
        >>> table_row(7, 1)
        '7'
    """
    if count < 1:
        raise InvalidArgumentError(f"table_row requires count >= 1, got {count}")
    return " ".join(str(base * step) for step in range(1, count + 1))


def random_between(low: int, high: int, *, rng: random.Random | None = None) -> int:
    """Return a uniformly distributed integer in the inclusive range ``[low, high]``.

    Uses the process-wide random source unless ``rng`` is given.

    Raises:
        InvalidArgumentError: If ``low`` is greater than ``high``.

    Example:
        >>> random_between(5, 5)
        5
        >>> 1 <= random_between(1, 6, rng=random.Random(7)) <= 6
        True
    """
    if low > high:
        raise InvalidArgumentError(f"random_between requires low <= high, got {low} > {high}")
    source = rng if rng is not None else random
    return source.randint(low, high)


def contains_digit(number: int, digit: int) -> bool:
    """Return whether the decimal representation of ``number`` contains ``digit``.

    The sign of ``number`` is ignored.

    Raises:
        InvalidArgumentError: If ``digit`` is outside 0-9.

    Example:
        >>> contains_digit(4829, 8)
        True
        >>> contains_digit(-1001, 0)
        True
    """
    if not 0 <= digit <= 9:
        raise InvalidArgumentError(f"contains_digit requires a digit between 0 and 9, got {digit}")
    return str(digit) in str(number).lstrip("-")


def average(a: int, b: int, c: int) -> float:
    """Return the arithmetic mean of three integers without rounding.

    Example:
        >>> average(0, 10, 20)
        10.0
    """
    return (a + b + c) / 3


def is_strong(pw: str) -> bool:
    """Return whether ``pw`` is at least 8 characters with an ASCII digit and uppercase letter.

    Symbols are allowed but not required. Non-ASCII digits and uppercase
    letters do not count.

    Example:
        >>> is_strong("Abc12345")
        True
        >>> is_strong("A1b2C3")
        False
    """
    if len(pw) < MIN_STRONG_LENGTH:
        return False
    has_digit = any(ch in _ASCII_DIGITS for ch in pw)
    has_upper = any(ch in _ASCII_UPPERCASE for ch in pw)
    return has_digit and has_upper


__all__ = [
    "MIN_STRONG_LENGTH",
    "VOWELS",
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
]

"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Input violates an exercise's documented precondition.

    Raised synchronously by the exercise functions (empty string to
    ``last_char``, ``count < 1`` to ``table_row``, ...) and by argument
    parsing in the catalog. Inherits from ValueError so plain
    ``except ValueError`` handlers also catch it.

    Example:
        >>> err = InvalidArgumentError("last_char requires a non-empty string")
        >>> str(err)
        'last_char requires a non-empty string'
        >>> isinstance(err, ValueError)
        True
    """


class UnknownExerciseError(KeyError):
    """Catalog lookup for an exercise name that does not exist.

    ``KeyError`` quotes its argument when converted to a string; this class
    returns the plain message instead so CLI output stays readable.

    Example:
        >>> err = UnknownExerciseError("Unknown exercise 'triple'")
        >>> str(err)
        "Unknown exercise 'triple'"
        >>> isinstance(err, KeyError)
        True
    """

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when the ``[runner]`` section fails validation. Typically caught
    at CLI boundaries to provide user-friendly error messages.

    Example:
        >>> err = ConfigurationError("runner.float_tolerance must be positive")
        >>> str(err)
        'runner.float_tolerance must be positive'
    """


__all__ = [
    "ConfigurationError",
    "InvalidArgumentError",
    "UnknownExerciseError",
]

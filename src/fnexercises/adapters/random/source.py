"""Random source selection for exercises that draw random numbers."""

from __future__ import annotations

import random


def make_random(seed: int | None = None) -> random.Random | None:
    """Return a generator seeded with ``seed``, or ``None`` for the process-wide source.

    Example:
        >>> make_random() is None
        True
        >>> make_random(4).randint(1, 100) == make_random(4).randint(1, 100)
        True
    """
    if seed is None:
        return None
    return random.Random(seed)


__all__ = ["make_random"]

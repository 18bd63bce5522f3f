"""Deterministic random source for testing."""

from __future__ import annotations

import random

#: Seed used when the caller does not supply one.
DEFAULT_TEST_SEED = 0


def make_random_in_memory(seed: int | None = None) -> random.Random:
    """Return a seeded generator; never falls back to the process-wide source."""
    return random.Random(DEFAULT_TEST_SEED if seed is None else seed)


__all__ = ["DEFAULT_TEST_SEED", "make_random_in_memory"]

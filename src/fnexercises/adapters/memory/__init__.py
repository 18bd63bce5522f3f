"""In-memory adapter implementations for testing.

Lightweight implementations of all application ports that operate
entirely in memory -- no filesystem, no logging framework, no
process-wide random state.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.logging` - In-memory logging adapter
    * :mod:`.random` - Deterministic random source
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import display_config_in_memory, get_config_in_memory
from .logging import init_logging_in_memory
from .random import make_random_in_memory

# Static conformance assertions
if TYPE_CHECKING:
    from fnexercises.application.ports import (
        DisplayConfig,
        GetConfig,
        InitLogging,
        MakeRandom,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_make_random: MakeRandom = make_random_in_memory

__all__ = [
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
    "make_random_in_memory",
]

"""Random source adapter.

Contents:
    * :func:`.source.make_random` - seeded or process-wide random source
"""

from __future__ import annotations

from .source import make_random

__all__ = ["make_random"]

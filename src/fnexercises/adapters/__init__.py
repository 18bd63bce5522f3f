"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.cli` - rich-click CLI
    * :mod:`.config` - Configuration loading, display, overrides and runner settings
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.random` - Random source selection
    * :mod:`.report` - Human and JSON run reports
    * :mod:`.memory` - In-memory adapters for tests
"""

from __future__ import annotations

__all__: list[str] = []

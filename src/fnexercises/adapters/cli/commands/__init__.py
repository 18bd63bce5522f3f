"""CLI command implementations.

Contents:
    * Info command from :mod:`.info`
    * Exercise listing and single calls from :mod:`.exercises`
    * Sample runner command from :mod:`.run_cmd`
    * Config display from :mod:`.config`
"""

from __future__ import annotations

from .config import cli_config
from .exercises import cli_call, cli_list
from .info import cli_info
from .run_cmd import cli_run

__all__ = [
    "cli_call",
    "cli_config",
    "cli_info",
    "cli_list",
    "cli_run",
]

"""Configuration adapter - loading, display, overrides, and runner settings.

Contents:
    * :mod:`.loader` - Configuration loading with caching
    * :mod:`.display` - Configuration display in human/JSON formats
    * :mod:`.overrides` - CLI ``--set`` override parsing and application
    * :mod:`.settings` - Validated ``[runner]`` section
"""

from __future__ import annotations

from .display import display_config
from .loader import get_config, get_default_config_path
from .overrides import apply_overrides
from .settings import RunnerSettings, load_runner_settings

__all__ = [
    "get_config",
    "get_default_config_path",
    "display_config",
    "apply_overrides",
    "RunnerSettings",
    "load_runner_settings",
]

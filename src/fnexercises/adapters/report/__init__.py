"""Report adapter - human and JSON renderings of sample runs.

Contents:
    * :mod:`.render` - value formatting and report rendering
"""

from __future__ import annotations

from .render import format_call, format_plain, format_value, render_human, render_json

__all__ = [
    "format_call",
    "format_plain",
    "format_value",
    "render_human",
    "render_json",
]

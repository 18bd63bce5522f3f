"""Static package metadata surfaced to CLI commands and documentation.

Keeps the values shown by ``fnexercises info`` and ``--version`` in one
place together with the identifiers lib_layered_config uses to locate
configuration directories.

Contents:
    * Metadata constants (name, title, version, ...).
    * ``LAYEREDCONF_*`` identifiers for configuration discovery.
    * :func:`print_info` - render the metadata block.
"""

from __future__ import annotations

from typing import Final

name: Final[str] = "fnexercises"
title: Final[str] = "Value-returning function exercises with a sample runner"
version: Final[str] = "1.0.0"
homepage: Final[str] = "https://github.com/fnexercises/fnexercises"
author: Final[str] = "fnexercises contributors"
author_email: Final[str] = "maintainers@fnexercises.dev"
shell_command: Final[str] = "fnexercises"

#: Vendor segment used for macOS/Windows configuration paths.
LAYEREDCONF_VENDOR: Final[str] = "fnexercises"
#: Application segment used for macOS/Windows configuration paths.
LAYEREDCONF_APP: Final[str] = "fnexercises"
#: Slug used for XDG paths and environment variable prefixes.
LAYEREDCONF_SLUG: Final[str] = "fnexercises"


def print_info() -> None:
    """Print the summarised metadata block used by the ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for fnexercises:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]

"""Shared helpers for CLI command modules.

Contents:
    * :func:`require_runner_settings` - Parse ``[runner]`` or exit with CONFIG_ERROR.
    * :func:`fail_invalid_argument` - Report a bad argument and exit with INVALID_ARGUMENT.
"""

from __future__ import annotations

import logging
from typing import NoReturn

import rich_click as click

from fnexercises.adapters.config.settings import RunnerSettings, load_runner_settings
from fnexercises.domain.errors import ConfigurationError

from ..context import CLIContext
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


def require_runner_settings(cli_ctx: CLIContext) -> RunnerSettings:
    """Return validated runner settings from the CLI context's config.

    Raises:
        SystemExit: With CONFIG_ERROR (78) if the ``[runner]`` section is invalid.
    """
    try:
        return load_runner_settings(cli_ctx.config)
    except ConfigurationError as exc:
        logger.error("Invalid runner configuration", extra={"error": str(exc)})
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc


def fail_invalid_argument(exc: Exception) -> NoReturn:
    """Print ``exc`` to stderr and exit with INVALID_ARGUMENT (22)."""
    logger.warning("Rejected invalid argument", extra={"error": str(exc), "error_type": type(exc).__name__})
    click.echo(f"Error: {exc}", err=True)
    raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


__all__ = ["fail_invalid_argument", "require_runner_settings"]

"""Commands that list exercises and invoke a single one.

Contents:
    * :func:`cli_list` - Print every exercise with its signature.
    * :func:`cli_call` - Run one exercise on textual arguments.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from fnexercises.adapters.report.render import format_plain
from fnexercises.domain.catalog import EXERCISES, get_exercise, invoke, parse_arguments
from fnexercises.domain.errors import InvalidArgumentError, UnknownExerciseError

from ..constants import CLICK_CONTEXT_SETTINGS, RAW_ARGS_CONTEXT_SETTINGS
from ..context import get_cli_context
from ._shared import fail_invalid_argument, require_runner_settings

logger = logging.getLogger(__name__)


@click.command("list", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_list() -> None:
    """List the available exercises, one per line."""
    with lib_log_rich.runtime.bind(job_id="cli-list", extra={"command": "list"}):
        logger.info("Listing exercises", extra={"count": len(EXERCISES)})
        width = max(len(exercise.signature) for exercise in EXERCISES.values())
        for exercise in EXERCISES.values():
            click.echo(f"{exercise.signature.ljust(width)}  {exercise.summary}")


@click.command("call", context_settings=RAW_ARGS_CONTEXT_SETTINGS)
@click.option("--seed", type=int, default=None, help="Seed for random-between (overrides runner.seed)")
@click.argument("name")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli_call(ctx: click.Context, seed: int | None, name: str, args: tuple[str, ...]) -> None:
    r"""Run exercise NAME with ARGS and print the returned value.

    \b
    Examples:
      fnexercises call table-row 5 4
      fnexercises call abs -9
      fnexercises call --seed 7 random-between 1 6
    """
    cli_ctx = get_cli_context(ctx)
    settings = require_runner_settings(cli_ctx)
    effective_seed = seed if seed is not None else settings.seed

    extra = {"command": "call", "exercise": name, "call_args": list(args)}
    with lib_log_rich.runtime.bind(job_id="cli-call", extra=extra):
        try:
            exercise = get_exercise(name)
            parsed = parse_arguments(exercise, args)
            logger.info("Calling exercise", extra={"exercise": exercise.name, "seeded": effective_seed is not None})
            result = invoke(exercise, parsed, rng=cli_ctx.services.make_random(effective_seed))
        except (UnknownExerciseError, InvalidArgumentError) as exc:
            fail_invalid_argument(exc)
        click.echo(format_plain(result))


__all__ = ["cli_call", "cli_list"]

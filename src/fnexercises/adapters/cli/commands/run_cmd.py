"""Run the literal sample cases and report one result per line.

Contents:
    * :func:`cli_run` - Run sample cases and print the report.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from fnexercises.adapters.report.render import render_human, render_json
from fnexercises.application.runner import RunReport, run_samples
from fnexercises.domain.catalog import EXERCISES
from fnexercises.domain.enums import OutputFormat
from fnexercises.domain.errors import UnknownExerciseError

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode
from ._shared import fail_invalid_argument, require_runner_settings

logger = logging.getLogger(__name__)


def _render(report: RunReport, output_format: OutputFormat) -> str:
    if output_format is OutputFormat.JSON:
        return render_json(report)
    return render_human(report)


@click.command("run", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--exercise",
    "exercises",
    multiple=True,
    metavar="NAME",
    help=f"Only run cases for this exercise (repeatable). One of: {', '.join(EXERCISES)}",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=None,
    help="Output format (default: runner.output_format)",
)
@click.option("--seed", type=int, default=None, help="Seed for random-between (overrides runner.seed)")
@click.option("--strict", is_flag=True, default=False, help="Exit with status 1 when any case fails")
@click.pass_context
def cli_run(
    ctx: click.Context,
    exercises: tuple[str, ...],
    output_format: str | None,
    seed: int | None,
    strict: bool,
) -> None:
    """Run every sample case, printing one result per line and a summary.

    Failed cases are reported but never stop the remaining cases. The exit
    status is 0 whenever the report was produced, unless --strict is given.
    """
    cli_ctx = get_cli_context(ctx)
    settings = require_runner_settings(cli_ctx)
    fmt = OutputFormat(output_format.lower()) if output_format else settings.output_format
    effective_seed = seed if seed is not None else settings.seed

    extra = {"command": "run", "format": fmt.value, "exercises": list(exercises), "strict": strict}
    with lib_log_rich.runtime.bind(job_id="cli-run", extra=extra):
        logger.info("Running sample cases", extra={"seeded": effective_seed is not None})
        try:
            report = run_samples(
                rng=cli_ctx.services.make_random(effective_seed),
                tolerance=settings.float_tolerance,
                only=set(exercises) or None,
            )
        except UnknownExerciseError as exc:
            fail_invalid_argument(exc)

        if lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.flush()
        click.echo(_render(report, fmt))

        if strict and not report.all_passed:
            logger.warning("Strict run finished with failures", extra={"failed": report.failed})
            raise SystemExit(ExitCode.GENERAL_ERROR)


__all__ = ["cli_run"]

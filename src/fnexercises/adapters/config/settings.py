"""Validated ``[runner]`` settings parsed from layered configuration.

Contents:
    * :class:`RunnerSettings` - Pydantic model for the ``[runner]`` section.
    * :func:`load_runner_settings` - parse a Config into RunnerSettings.
"""

from __future__ import annotations

from typing import Any, cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from fnexercises.application.runner import DEFAULT_FLOAT_TOLERANCE
from fnexercises.domain.enums import OutputFormat
from fnexercises.domain.errors import ConfigurationError


class RunnerSettings(BaseModel):
    """Immutable settings for the sample runner.

    Example:
        >>> settings = RunnerSettings(seed=3, output_format="JSON")
        >>> settings.output_format
        <OutputFormat.JSON: 'json'>
        >>> RunnerSettings().float_tolerance
        1e-09
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    seed: int | None = None
    float_tolerance: float = Field(default=DEFAULT_FLOAT_TOLERANCE, gt=0)
    output_format: OutputFormat = OutputFormat.HUMAN

    @field_validator("output_format", mode="before")
    @classmethod
    def _normalise_output_format(cls, v: Any) -> Any:
        """Accept ``HUMAN``/``Json`` spellings from env vars and config files."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("seed", mode="before")
    @classmethod
    def _coerce_empty_seed_to_none(cls, v: Any) -> Any:
        """Treat an empty string (unset env var) as "no seed"."""
        if isinstance(v, str) and not v.strip():
            return None
        return v


def load_runner_settings(config: Config) -> RunnerSettings:
    """Parse the ``[runner]`` section of ``config``.

    Raises:
        ConfigurationError: If the section contains unknown keys or invalid values.

    Example:
        >>> load_runner_settings(Config({"runner": {"seed": 9}}, {})).seed
        9
        >>> load_runner_settings(Config({}, {})).seed is None
        True
    """
    raw: object = config.get("runner", default={})
    section = cast("dict[str, object]", raw) if isinstance(raw, dict) else {}
    try:
        return RunnerSettings.model_validate(section)
    except ValidationError as exc:
        problems = "; ".join(f"runner.{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors())
        raise ConfigurationError(f"Invalid [runner] configuration: {problems}") from exc


__all__ = [
    "RunnerSettings",
    "load_runner_settings",
]

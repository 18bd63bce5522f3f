"""Runner settings stories: defaults, coercion, and validation failures."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from lib_layered_config import Config

from fnexercises.adapters.config.settings import RunnerSettings, load_runner_settings
from fnexercises.domain.enums import OutputFormat
from fnexercises.domain.errors import ConfigurationError


@pytest.mark.os_agnostic
def test_missing_runner_section_yields_defaults(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    settings = load_runner_settings(config_factory({}))

    assert settings == RunnerSettings()
    assert settings.seed is None
    assert settings.float_tolerance == 1e-9
    assert settings.output_format is OutputFormat.HUMAN


@pytest.mark.os_agnostic
def test_runner_section_values_are_parsed(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    config = config_factory({"runner": {"seed": "42", "float_tolerance": 1e-6, "output_format": "JSON"}})

    settings = load_runner_settings(config)

    assert settings.seed == 42
    assert settings.float_tolerance == 1e-6
    assert settings.output_format is OutputFormat.JSON


@pytest.mark.os_agnostic
def test_empty_seed_string_means_unseeded(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    assert load_runner_settings(config_factory({"runner": {"seed": ""}})).seed is None


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    "section",
    [
        {"float_tolerance": 0},
        {"float_tolerance": -1.0},
        {"output_format": "yaml"},
        {"seed": "abc"},
        {"sede": 1},
    ],
)
def test_invalid_runner_section_raises_configuration_error(
    config_factory: Callable[[dict[str, Any]], Config],
    section: dict[str, Any],
) -> None:
    with pytest.raises(ConfigurationError, match=r"Invalid \[runner\] configuration"):
        load_runner_settings(config_factory({"runner": section}))


@pytest.mark.os_agnostic
def test_settings_are_immutable() -> None:
    from pydantic import ValidationError

    settings = RunnerSettings()

    with pytest.raises(ValidationError):
        settings.seed = 3  # type: ignore[misc]


@pytest.mark.os_agnostic
def test_bundled_defaults_parse_cleanly(clear_config_cache: None) -> None:
    from fnexercises.adapters.config.loader import get_config

    settings = load_runner_settings(get_config())

    assert settings.float_tolerance > 0

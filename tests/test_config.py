# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests covering configuration loading."""

from __future__ import annotations

import os

import pytest
from pydantic import ValidationError

from pypaths.config import PathsConfig, load_config
from pypaths.errors import ConfigError


def test_defaults_without_environment() -> None:
    config = load_config({})
    assert config == PathsConfig()
    assert config.separator == os.pathsep
    assert config.split_style == "lines"
    assert config.jobs == 1
    assert config.color and config.emoji


def test_environment_values_are_applied() -> None:
    config = load_config(
        {
            "PATHS_SEPARATOR": ";",
            "PATHS_SPLIT_STYLE": " Escaped ",
            "PATHS_JOBS": "4",
            "PATHS_NO_EMOJI": "yes",
            "NO_COLOR": "1",
        }
    )
    assert config.separator == ";"
    assert config.split_style == "escaped"
    assert config.jobs == 4
    assert not config.emoji
    assert not config.color


def test_overrides_take_precedence_and_none_is_ignored() -> None:
    config = load_config({"PATHS_SEPARATOR": ";"}, separator=",", color=None)
    assert config.separator == ","
    assert config.color


def test_falsey_flags_keep_defaults() -> None:
    config = load_config({"PATHS_NO_COLOR": "0", "PATHS_NO_EMOJI": "off"})
    assert config.color and config.emoji


@pytest.mark.parametrize(
    "environ",
    [
        {"PATHS_SEPARATOR": "::"},
        {"PATHS_SEPARATOR": " "},
        {"PATHS_SEPARATOR": "/"},
        {"PATHS_SPLIT_STYLE": "bogus"},
        {"PATHS_JOBS": "0"},
        {"PATHS_JOBS": "many"},
    ],
)
def test_invalid_values_raise_config_error(environ: dict[str, str]) -> None:
    with pytest.raises(ConfigError):
        load_config(environ)


def test_reads_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PATHS_SEPARATOR", ",")
    assert load_config().separator == ","


def test_config_is_frozen() -> None:
    config = PathsConfig()
    with pytest.raises(ValidationError):
        config.separator = ";"  # type: ignore[misc]

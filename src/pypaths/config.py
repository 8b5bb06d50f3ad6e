# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Runtime configuration for the ``paths`` command-line tool."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .constants import (
    DEFAULT_SPLIT_STYLE,
    GLOBAL_NO_COLOR_ENV,
    JOBS_ENV,
    NO_COLOR_ENV,
    NO_EMOJI_ENV,
    PATH_SEPARATOR,
    SEPARATOR_ENV,
    SPLIT_STYLE_ENV,
    SplitStyle,
)
from .errors import ConfigError

_TRUTHY: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})


class PathsConfig(BaseModel):
    """Settings shared by every ``paths`` command."""

    model_config = ConfigDict(frozen=True)

    separator: str = PATH_SEPARATOR
    split_style: SplitStyle = DEFAULT_SPLIT_STYLE
    color: bool = True
    emoji: bool = True
    jobs: int = Field(default=1, ge=1)

    @field_validator("separator")
    @classmethod
    def _single_character(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError("separator must be exactly one character")
        if value.isspace() or value == "/":
            raise ValueError("separator may not be whitespace or '/'")
        return value


def _flag(value: str | None) -> bool:
    return value is not None and value.strip().lower() in _TRUTHY


def load_config(environ: Mapping[str, str] | None = None, **overrides: Any) -> PathsConfig:
    """Build a :class:`PathsConfig` from environment variables.

    Args:
        environ: Mapping to read from; defaults to :data:`os.environ`.
        **overrides: Explicit values (typically from CLI options) that take
            precedence over the environment. ``None`` values are ignored.

    Returns:
        PathsConfig: Validated configuration.

    Raises:
        ConfigError: If any value fails validation.
    """

    env = os.environ if environ is None else environ
    data: dict[str, Any] = {}
    if separator := env.get(SEPARATOR_ENV):
        data["separator"] = separator
    if split_style := env.get(SPLIT_STYLE_ENV):
        data["split_style"] = split_style.strip().lower()
    if jobs := env.get(JOBS_ENV):
        data["jobs"] = jobs.strip()
    if _flag(env.get(NO_COLOR_ENV)) or env.get(GLOBAL_NO_COLOR_ENV):
        data["color"] = False
    if _flag(env.get(NO_EMOJI_ENV)):
        data["emoji"] = False
    data.update({key: value for key, value in overrides.items() if value is not None})

    try:
        return PathsConfig(**data)
    except ValidationError as exc:
        errors = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
        )
        raise ConfigError(f"invalid configuration: {errors}") from exc


__all__ = ["PathsConfig", "load_config"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared constants for path manipulation and configuration."""

from __future__ import annotations

import os
from typing import Final, Literal

PATH_SEPARATOR: Final[str] = os.pathsep
DIR_SEPARATOR: Final[str] = "/"
ROOT_DIR: Final[str] = DIR_SEPARATOR

SPLIT_ESCAPED_JOINER: Final[str] = " "
SPLIT_LINES_JOINER: Final[str] = "\n"
ESCAPE_CHAR: Final[str] = "\\"

SplitStyle = Literal["lines", "escaped"]
DEFAULT_SPLIT_STYLE: Final[SplitStyle] = "lines"

SEPARATOR_ENV: Final[str] = "PATHS_SEPARATOR"
SPLIT_STYLE_ENV: Final[str] = "PATHS_SPLIT_STYLE"
JOBS_ENV: Final[str] = "PATHS_JOBS"
NO_COLOR_ENV: Final[str] = "PATHS_NO_COLOR"
NO_EMOJI_ENV: Final[str] = "PATHS_NO_EMOJI"
GLOBAL_NO_COLOR_ENV: Final[str] = "NO_COLOR"

__all__ = [
    "DEFAULT_SPLIT_STYLE",
    "DIR_SEPARATOR",
    "ESCAPE_CHAR",
    "GLOBAL_NO_COLOR_ENV",
    "JOBS_ENV",
    "NO_COLOR_ENV",
    "NO_EMOJI_ENV",
    "PATH_SEPARATOR",
    "ROOT_DIR",
    "SEPARATOR_ENV",
    "SPLIT_ESCAPED_JOINER",
    "SPLIT_LINES_JOINER",
    "SPLIT_STYLE_ENV",
    "SplitStyle",
]

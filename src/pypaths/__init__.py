# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Utilities for manipulating search-path strings such as ``$PATH``."""

from __future__ import annotations

from importlib import metadata

from .errors import ConfigError, InvalidPathError, PathsError, UsageError
from .normalize import normalize_dir, normalize_path, split_raw, validate_path
from .operations import (
    append,
    contains,
    dedupe,
    filter_existing,
    join,
    normalize_existing,
    prepend,
    split_escaped,
    split_lines,
)

__all__ = [
    "ConfigError",
    "InvalidPathError",
    "PathsError",
    "UsageError",
    "__version__",
    "append",
    "contains",
    "dedupe",
    "filter_existing",
    "join",
    "normalize_dir",
    "normalize_existing",
    "normalize_path",
    "prepend",
    "split_escaped",
    "split_lines",
    "split_raw",
    "validate_path",
]

try:
    __version__ = metadata.version("pypaths")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy raised by path operations and configuration."""

from __future__ import annotations


class PathsError(Exception):
    """Base class for failures raised by :mod:`pypaths`."""


class UsageError(PathsError):
    """Raised when a command is invoked without its required arguments."""


class InvalidPathError(PathsError):
    """Raised when a produced path string fails the validity post-condition."""

    def __init__(self, path: str, reason: str) -> None:
        """Record the offending ``path`` and the ``reason`` it was rejected.

        Args:
            path: Path string that failed validation.
            reason: Short description of the violated constraint.
        """

        super().__init__(f"invalid path {path!r}: {reason}")
        self.path = path
        self.reason = reason


class ConfigError(PathsError):
    """Raised when configuration input is invalid."""


__all__ = ["ConfigError", "InvalidPathError", "PathsError", "UsageError"]

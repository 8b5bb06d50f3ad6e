# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging, errors, state)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

import typer

from ..config import PathsConfig
from ..logging import debug as core_debug
from ..logging import fail as core_fail
from ..logging import warn as core_warn

HELP_HINT: Final[str] = "Use --help for help."


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


def report_error(message: str, *, use_color: bool | None = None) -> None:
    """Render ``Error: <message>`` followed by a ``--help`` hint on stderr.

    Args:
        message: Failure description shown after ``Error:``.
        use_color: Optional explicit colour flag overriding TTY detection.
    """

    core_fail(f"Error: {message}", use_emoji=False, use_color=use_color)
    core_fail(f"       {HELP_HINT}", use_emoji=False, use_color=use_color)


@dataclass(slots=True)
class CLILogger:
    """Adapter around project logging helpers respecting CLI presentation settings."""

    use_emoji: bool
    use_color: bool
    debug_enabled: bool = False

    def fail(self, message: str) -> None:
        """Report a failure as ``Error: <message>`` plus the ``--help`` hint."""

        report_error(message, use_color=self.use_color)

    def warn(self, message: str) -> None:
        """Log a warning message on stderr."""

        core_warn(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def echo(self, message: str) -> None:
        """Write a command result to stdout without a trailing newline.

        Args:
            message: Result text written to standard output.
        """

        typer.echo(message, nl=False)

    def debug(self, message: str) -> None:
        """Emit a debug message when debug logging is enabled."""

        if self.debug_enabled:
            core_debug(message, use_color=self.use_color)


def build_cli_logger(config: PathsConfig, *, debug: bool = False) -> CLILogger:
    """Return a ``CLILogger`` configured from ``config``.

    Args:
        config: Effective runtime configuration.
        debug: Whether debug logging should be enabled.

    Returns:
        CLILogger: Logger honouring colour and emoji preferences.
    """

    return CLILogger(use_emoji=config.emoji, use_color=config.color, debug_enabled=debug)


@dataclass(frozen=True, slots=True)
class CLIState:
    """Per-invocation state stored on the Typer context object."""

    config: PathsConfig
    logger: CLILogger


__all__ = ["CLIError", "CLILogger", "CLIState", "HELP_HINT", "build_cli_logger", "report_error"]

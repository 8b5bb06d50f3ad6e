# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typer helpers giving every ``paths`` failure the same ``Error:`` report."""

from __future__ import annotations

import importlib
import sys
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from typing import Any, Final

import typer
from typer.core import TyperGroup

from ..errors import UsageError
from .shared import CLIError, report_error

# Typer either re-exports click's exceptions or bundles its own copy of click;
# resolve the usage-error base from the module that defines ``typer.BadParameter``.
TYPER_USAGE_ERROR: Final[type[Exception]] = importlib.import_module(
    typer.BadParameter.__module__,
).UsageError


@contextmanager
def _usage_errors() -> Iterator[None]:
    """Re-raise Typer usage failures as :class:`pypaths.errors.UsageError`."""

    try:
        yield
    except TYPER_USAGE_ERROR as exc:
        raise UsageError(exc.format_message()) from exc


class PathsTyperGroup(TyperGroup):
    """Typer group reporting usage and CLI failures as one ``Error:`` line.

    Parsing the global options, resolving the sub-command and parsing its
    arguments all raise :class:`pypaths.errors.UsageError` on bad input (no
    command, unknown command, missing argument). :meth:`main` renders it, or a
    :class:`CLIError`, and exits with status ``1``.
    """

    def make_context(
        self,
        info_name: str | None,
        args: list[str],
        parent: Any = None,
        **extra: Any,
    ) -> Any:
        """Parse the global options, normalising usage failures."""

        with _usage_errors():
            return super().make_context(info_name, args, parent=parent, **extra)

    def invoke(self, ctx: Any) -> Any:
        """Invoke the resolved sub-command, normalising usage failures."""

        with _usage_errors():
            return super().invoke(ctx)

    def main(
        self,
        args: Sequence[str] | None = None,
        prog_name: str | None = None,
        complete_var: str | None = None,
        standalone_mode: bool = True,
        **extra: Any,
    ) -> Any:
        """Run the application, turning escaped failures into exit status ``1``."""

        try:
            return super().main(
                args=args,
                prog_name=prog_name,
                complete_var=complete_var,
                standalone_mode=standalone_mode,
                **extra,
            )
        except (UsageError, CLIError) as exc:
            if not standalone_mode:
                raise
            report_error(str(exc))
            sys.exit(exc.exit_code if isinstance(exc, CLIError) else 1)


def create_typer(*, cls: type[TyperGroup] | None = None, **kwargs: Any) -> typer.Typer:
    """Return a Typer application using :class:`PathsTyperGroup` and plain help.

    Args:
        cls: Optional group class; defaults to :class:`PathsTyperGroup`.
        **kwargs: Additional arguments forwarded to :class:`typer.Typer`.

    Returns:
        typer.Typer: Configured Typer application.
    """

    kwargs.setdefault("rich_markup_mode", None)
    kwargs.setdefault("add_completion", False)
    kwargs.setdefault("pretty_exceptions_enable", False)
    return typer.Typer(cls=cls or PathsTyperGroup, **kwargs)


__all__ = ["PathsTyperGroup", "TYPER_USAGE_ERROR", "create_typer"]

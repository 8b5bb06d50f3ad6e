# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring the ``paths`` commands."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from enum import Enum

import typer

from .. import __version__
from ..config import load_config
from ..errors import PathsError
from ..normalize import normalize_dir, normalize_path
from ..operations import (
    append,
    contains,
    filter_existing,
    join,
    normalize_existing,
    prepend,
    split_escaped,
    split_lines,
)
from . import help as helptext
from .shared import CLIError, CLILogger, CLIState, build_cli_logger, report_error
from .typer_ext import create_typer

app = create_typer(
    name="paths",
    help=helptext.APP_HELP,
    epilog=helptext.APP_EPILOG,
    context_settings={"help_option_names": ["-h", "--help"]},
)


class SplitStyleChoice(str, Enum):
    """Output formats supported by ``paths split``."""

    LINES = "lines"
    ESCAPED = "escaped"


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"paths {__version__}")
        raise typer.Exit(code=0)


@contextmanager
def _reporting_errors(logger: CLILogger | None = None) -> Iterator[None]:
    """Report domain failures as ``Error: <message>`` and exit with their status."""

    try:
        try:
            yield
        except PathsError as exc:
            raise CLIError(str(exc)) from exc
    except CLIError as exc:
        if logger is None:
            report_error(str(exc))
        else:
            logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc


def _warn_blank(state: CLIState, directories: Sequence[str]) -> None:
    blank = sum(1 for directory in directories if not normalize_dir(directory))
    if blank:
        state.logger.warn(f"Ignoring {blank} blank directory argument(s)")


def _state(ctx: typer.Context) -> CLIState:
    state: CLIState = ctx.obj
    return state


@app.callback()
def main_callback(
    ctx: typer.Context,
    separator: str | None = typer.Option(
        None,
        "--separator",
        help="Character joining directories (defaults to $PATHS_SEPARATOR or the OS path separator).",
    ),
    no_color: bool = typer.Option(False, "--no-color", help="Disable coloured diagnostics."),
    no_emoji: bool = typer.Option(False, "--no-emoji", help="Disable emoji in diagnostics."),
    debug: bool = typer.Option(False, "--debug", help="Emit debug diagnostics on stderr."),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=_version_callback,
        is_eager=True,
        help=helptext.VERSION_HELP,
    ),
) -> None:
    """Load configuration shared by every command."""

    del version
    with _reporting_errors():
        config = load_config(
            separator=separator,
            color=False if no_color else None,
            emoji=False if no_emoji else None,
        )
    logger = build_cli_logger(config, debug=debug)
    logger.debug(f"config separator={config.separator!r} split_style={config.split_style} jobs={config.jobs}")
    ctx.obj = CLIState(config=config, logger=logger)


@app.command("normalize-dir", help=helptext.NORMALIZE_DIR_HELP)
def normalize_dir_command(
    ctx: typer.Context,
    directory: str = typer.Argument(..., metavar="DIR", help="Directory to normalize."),
) -> None:
    state = _state(ctx)
    state.logger.echo(normalize_dir(directory))


@app.command("normalize", help=helptext.NORMALIZE_HELP)
def normalize_command(
    ctx: typer.Context,
    path: str = typer.Argument(..., metavar="PATH", help="Path to normalize."),
    existence: bool = typer.Option(
        False,
        "--existence",
        "-e",
        help="Drop directories that do not exist.",
    ),
) -> None:
    state = _state(ctx)
    separator = state.config.separator
    with _reporting_errors(state.logger):
        if existence:
            result = normalize_existing(path, separator=separator)
        else:
            result = normalize_path(path, separator=separator)
    state.logger.echo(result)


@app.command("split", help=helptext.SPLIT_HELP)
def split_command(
    ctx: typer.Context,
    path: str = typer.Argument(..., metavar="PATH", help="Path to split."),
    style: SplitStyleChoice | None = typer.Option(
        None,
        "--style",
        "-s",
        case_sensitive=False,
        help="One directory per line, or space-joined with whitespace escaped.",
    ),
) -> None:
    state = _state(ctx)
    selected = style.value if style is not None else state.config.split_style
    state.logger.debug(f"split style={selected}")
    splitter = split_escaped if selected == SplitStyleChoice.ESCAPED.value else split_lines
    with _reporting_errors(state.logger):
        result = splitter(path, separator=state.config.separator)
    state.logger.echo(result)


@app.command("filter", help=helptext.FILTER_HELP)
def filter_command(
    ctx: typer.Context,
    path: str = typer.Argument(..., metavar="PATH", help="Path to filter."),
    jobs: int | None = typer.Option(
        None,
        "--jobs",
        "-j",
        min=1,
        help="Probe directories concurrently with this many threads.",
    ),
) -> None:
    state = _state(ctx)
    workers = jobs if jobs is not None else state.config.jobs
    state.logger.debug(f"filter jobs={workers}")
    with _reporting_errors(state.logger):
        result = filter_existing(path, separator=state.config.separator, max_workers=workers)
    state.logger.echo(result)


@app.command("has", help=helptext.HAS_HELP)
def has_command(
    ctx: typer.Context,
    path: str = typer.Argument(..., metavar="PATH", help="Path to search."),
    directory: str = typer.Argument(..., metavar="DIR", help="Directory to look for."),
) -> None:
    state = _state(ctx)
    with _reporting_errors(state.logger):
        found = contains(path, directory, separator=state.config.separator)
    state.logger.debug(f"has dir={directory!r} found={found}")
    raise typer.Exit(code=0 if found else 1)


@app.command("prepend", help=helptext.PREPEND_HELP)
def prepend_command(
    ctx: typer.Context,
    path: str = typer.Argument(..., metavar="PATH", help="Path to prepend to."),
    directories: list[str] = typer.Argument(..., metavar="DIR...", help="Directories to prepend."),
) -> None:
    state = _state(ctx)
    _warn_blank(state, directories)
    with _reporting_errors(state.logger):
        result = prepend(path, directories, separator=state.config.separator)
    state.logger.echo(result)


@app.command("append", help=helptext.APPEND_HELP)
def append_command(
    ctx: typer.Context,
    path: str = typer.Argument(..., metavar="PATH", help="Path to append to."),
    directories: list[str] = typer.Argument(..., metavar="DIR...", help="Directories to append."),
) -> None:
    state = _state(ctx)
    _warn_blank(state, directories)
    with _reporting_errors(state.logger):
        result = append(path, directories, separator=state.config.separator)
    state.logger.echo(result)


@app.command("join", help=helptext.JOIN_HELP)
def join_command(
    ctx: typer.Context,
    directories: list[str] = typer.Argument(..., metavar="DIR...", help="Directories to join."),
) -> None:
    state = _state(ctx)
    _warn_blank(state, directories)
    with _reporting_errors(state.logger):
        result = join(directories, separator=state.config.separator)
    state.logger.echo(result)


@app.command("help", help=helptext.HELP_HELP)
def help_command(ctx: typer.Context) -> None:
    parent = ctx.parent if ctx.parent is not None else ctx
    typer.echo(parent.get_help())


@app.command("version", help=helptext.VERSION_HELP)
def version_command() -> None:
    _version_callback(True)


def main(argv: Sequence[str] | None = None) -> None:
    """Run the ``paths`` CLI; used by the console script entry point."""

    app(args=list(argv) if argv is not None else None, prog_name="paths")


__all__ = ["SplitStyleChoice", "app", "main"]

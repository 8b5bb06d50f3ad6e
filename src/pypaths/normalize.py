# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Normalisation of directory tokens and separator-joined path strings.

A *path* is a list of directories joined by a single separator character
(``os.pathsep`` by default). Normalisation trims whitespace, collapses
repeated slashes and separators, drops empty segments and removes trailing
slashes while leaving the root directory ``/`` untouched.
"""

from __future__ import annotations

from collections.abc import Iterable

from .constants import DIR_SEPARATOR, PATH_SEPARATOR, ROOT_DIR
from .errors import InvalidPathError

_NUL = "\x00"


def _collapse_runs(text: str, char: str) -> str:
    """Return ``text`` with every run of ``char`` reduced to a single occurrence.

    Args:
        text: Input string to scan.
        char: Character whose repeated runs are collapsed.

    Returns:
        str: Text without consecutive duplicates of ``char``.
    """

    pieces: list[str] = []
    in_run = False
    for current in text:
        if current == char:
            if in_run:
                continue
            in_run = True
        else:
            in_run = False
        pieces.append(current)
    return "".join(pieces)


def normalize_dir(directory: str) -> str:
    """Return ``directory`` trimmed, with single slashes and no trailing slash.

    Args:
        directory: Raw directory token.

    Returns:
        str: Normalised directory. ``"/"`` is returned unchanged and the empty
        string normalises to itself.
    """

    result = _collapse_runs(directory.strip(), DIR_SEPARATOR)
    # Dropping a trailing slash can expose whitespace ("a/ /" -> "a/ "), so
    # repeat until the token ends in neither.
    while result != ROOT_DIR and result.endswith(DIR_SEPARATOR):
        result = result[: -len(DIR_SEPARATOR)].rstrip()
    return result


def split_raw(path: str, *, separator: str = PATH_SEPARATOR) -> list[str]:
    """Split ``path`` on ``separator``, treating adjacent whitespace as delimiter.

    Whitespace inside a token is kept; whitespace touching a separator or the
    ends of ``path`` is consumed. Empty tokens are dropped.

    Args:
        path: Raw path string.
        separator: Character joining directories.

    Returns:
        list[str]: Tokens in their original order. Tokens are not normalised.
    """

    tokens: list[str] = []
    for piece in path.split(separator):
        token = piece.strip()
        if token:
            tokens.append(token)
    return tokens


def join_tokens(tokens: Iterable[str], *, separator: str = PATH_SEPARATOR) -> str:
    """Join ``tokens`` with ``separator`` and verify the result."""

    path = separator.join(tokens)
    validate_path(path, separator=separator)
    return path


def validate_path(path: str, *, separator: str = PATH_SEPARATOR) -> None:
    """Raise :class:`InvalidPathError` when ``path`` is not a minimal path string.

    Args:
        path: Path string produced by a normalising operation.
        separator: Character joining directories.

    Raises:
        InvalidPathError: If ``path`` has a NUL byte, a leading or trailing
            separator, or an empty segment.
    """

    if not path:
        return
    if _NUL in path:
        raise InvalidPathError(path, "contains a NUL character")
    if path.startswith(separator) or path.endswith(separator):
        raise InvalidPathError(path, "has a leading or trailing separator")
    if separator * 2 in path:
        raise InvalidPathError(path, "contains an empty segment")


def normalize_path(path: str, *, separator: str = PATH_SEPARATOR) -> str:
    """Return the canonical form of ``path``.

    Args:
        path: Raw path string, e.g. the value of ``$PATH``.
        separator: Character joining directories.

    Returns:
        str: Normalised directories joined by a single ``separator``.

    Raises:
        InvalidPathError: If the normalised result fails :func:`validate_path`.
    """

    text = path.strip().strip(separator)
    text = _collapse_runs(text, separator)
    tokens = [normalize_dir(token) for token in split_raw(text, separator=separator)]
    return join_tokens((token for token in tokens if token), separator=separator)


def normalized_tokens(path: str, *, separator: str = PATH_SEPARATOR) -> list[str]:
    """Return the normalised directory tokens of ``path`` in search order."""

    return split_raw(normalize_path(path, separator=separator), separator=separator)


__all__ = [
    "join_tokens",
    "normalize_dir",
    "normalize_path",
    "normalized_tokens",
    "split_raw",
    "validate_path",
]

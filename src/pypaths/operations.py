# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""High-level operations on path strings built atop :mod:`pypaths.normalize`."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import TypeVar

from .constants import ESCAPE_CHAR, PATH_SEPARATOR, SPLIT_ESCAPED_JOINER, SPLIT_LINES_JOINER
from .filesystem import ExistencePredicate, is_existing_directory
from .normalize import join_tokens, normalize_dir, normalized_tokens

ItemT = TypeVar("ItemT", bound=Hashable)


def dedupe(items: Iterable[ItemT]) -> list[ItemT]:
    """Return ``items`` without repeats, keeping the first occurrence of each.

    Args:
        items: Values to deduplicate.

    Returns:
        list[ItemT]: Distinct values in first-seen order.
    """

    seen: set[ItemT] = set()
    result: list[ItemT] = []
    for item in items:
        if item in seen:
            continue
        seen.add(item)
        result.append(item)
    return result


def _escape_whitespace(token: str) -> str:
    return "".join(f"{ESCAPE_CHAR}{char}" if char.isspace() else char for char in token)


def split_escaped(path: str, *, separator: str = PATH_SEPARATOR) -> str:
    """Return the directories of ``path`` space-joined with whitespace escaped.

    Example:
        ``"/bin:/a b"`` renders as ``/bin /a\\ b``.
    """

    tokens = normalized_tokens(path, separator=separator)
    return SPLIT_ESCAPED_JOINER.join(_escape_whitespace(token) for token in tokens)


def split_lines(path: str, *, separator: str = PATH_SEPARATOR) -> str:
    """Return the directories of ``path`` one per line, unescaped."""

    return SPLIT_LINES_JOINER.join(normalized_tokens(path, separator=separator))


def _probe(tokens: Sequence[str], exists: ExistencePredicate, max_workers: int | None) -> list[bool]:
    if max_workers is None or max_workers <= 1 or len(tokens) <= 1:
        return [exists(token) for token in tokens]
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        return list(executor.map(exists, tokens))


def filter_existing(
    path: str,
    exists: ExistencePredicate = is_existing_directory,
    *,
    separator: str = PATH_SEPARATOR,
    max_workers: int | None = None,
) -> str:
    """Remove directories that do not exist and duplicates from ``path``.

    Args:
        path: Raw path string.
        exists: Predicate reporting whether a directory exists.
        separator: Character joining directories.
        max_workers: When greater than one, probe directories concurrently on
            a thread pool. Output order always follows ``path``.

    Returns:
        str: Surviving directories in first-occurrence order, or ``""``.
    """

    tokens = normalized_tokens(path, separator=separator)
    flags = _probe(tokens, exists, max_workers)
    kept = [token for token, present in zip(tokens, flags, strict=True) if present]
    return join_tokens(dedupe(kept), separator=separator)


def normalize_existing(
    path: str,
    exists: ExistencePredicate = is_existing_directory,
    *,
    separator: str = PATH_SEPARATOR,
) -> str:
    """Normalise ``path`` keeping only directories that exist.

    Backs ``normalize --existence``; equivalent to :func:`filter_existing`
    run sequentially.
    """

    return filter_existing(path, exists, separator=separator)


def contains(path: str, directory: str, *, separator: str = PATH_SEPARATOR) -> bool:
    """Return ``True`` when normalised ``directory`` is a directory of ``path``.

    Comparison is exact and case-sensitive after normalisation, so
    ``contains("/bin:/usr/bin/", "/usr//bin")`` is ``True``.
    """

    target = normalize_dir(directory)
    if not target:
        return False
    return target in normalized_tokens(path, separator=separator)


def prepend(path: str, directories: Sequence[str], *, separator: str = PATH_SEPARATOR) -> str:
    """Insert each missing directory at the front of ``path``.

    Directories are processed in the given order and each one is inserted
    before everything already present, so the new entries appear in reverse:
    ``prepend("/bin", ["/usr/bin", "/opt/bin"])`` gives ``/opt/bin:/usr/bin:/bin``.

    Args:
        path: Raw path string.
        directories: Directories to add.
        separator: Character joining directories.

    Returns:
        str: The resulting normalised path string.
    """

    tokens = normalized_tokens(path, separator=separator)
    present = set(tokens)
    for directory in map(normalize_dir, directories):
        if not directory or directory in present:
            continue
        tokens.insert(0, directory)
        present.add(directory)
    return join_tokens(tokens, separator=separator)


def append(path: str, directories: Sequence[str], *, separator: str = PATH_SEPARATOR) -> str:
    """Add each missing directory to the end of ``path``, keeping their order.

    Args:
        path: Raw path string.
        directories: Directories to add.
        separator: Character joining directories.

    Returns:
        str: The resulting normalised path string.
    """

    tokens = normalized_tokens(path, separator=separator)
    present = set(tokens)
    for directory in map(normalize_dir, directories):
        if not directory or directory in present:
            continue
        tokens.append(directory)
        present.add(directory)
    return join_tokens(tokens, separator=separator)


def join(directories: Iterable[str], *, separator: str = PATH_SEPARATOR) -> str:
    """Join normalised ``directories`` with ``separator``.

    No deduplication or existence filtering happens; directories that
    normalise to the empty string are skipped.
    """

    normalized = (normalize_dir(directory) for directory in directories)
    return join_tokens((directory for directory in normalized if directory), separator=separator)


__all__ = [
    "append",
    "contains",
    "dedupe",
    "filter_existing",
    "join",
    "normalize_existing",
    "prepend",
    "split_escaped",
    "split_lines",
]

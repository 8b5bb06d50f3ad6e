# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Filesystem probes used when filtering path strings."""

# pylint: disable=too-few-public-methods -- Protocol definitions intentionally expose minimal method surfaces.

from __future__ import annotations

import stat
from os import stat as os_stat
from typing import Protocol, runtime_checkable


@runtime_checkable
class ExistencePredicate(Protocol):
    """Callable deciding whether a directory token names an existing directory."""

    def __call__(self, path: str) -> bool:
        """Return ``True`` when ``path`` is an existing directory."""

        raise NotImplementedError


def is_existing_directory(path: str) -> bool:
    """Return ``True`` when ``path`` exists and is a directory.

    Any error raised while probing (permission denied, invalid names) is
    reported as ``False``.

    Args:
        path: Directory token to probe. Symlinks are followed.

    Returns:
        bool: ``True`` if ``path`` resolves to a directory.
    """

    if not path:
        return False
    try:
        return stat.S_ISDIR(os_stat(path).st_mode)
    except (OSError, ValueError):
        return False


__all__ = ["ExistencePredicate", "is_existing_directory"]

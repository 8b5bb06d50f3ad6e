# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Static help text rendered by the ``paths`` CLI."""

from __future__ import annotations

from typing import Final

APP_HELP: Final[str] = (
    "A utility for manipulating paths ($PATH, $MANPATH, $INFOPATH, etc.)."
)

# "\b" keeps Click from re-wrapping the example block.
APP_EPILOG: Final[str] = """\b
Examples:
  $ paths normalize-dir "//foo//bar/baz///"
  > /foo/bar/baz
  $ paths normalize ":/bin/::/usr/bin"
  > /bin:/usr/bin
  $ paths split ":/bin/:://a:/usr/bin"
  > /bin
  > /a
  > /usr/bin
  $ paths filter "/bin:/opt/atom//:/usr/bin:/usr/fake:/opt/atom"
  > /bin:/opt/atom:/usr/bin
  $ paths has "/bin:/usr/bin/" "/usr/bin"; echo $?
  > 0
  $ paths prepend "/bin" "/usr/bin" "/usr/share/go/bin"
  > /usr/share/go/bin:/usr/bin:/bin
  $ paths append "/bin" "/usr/bin/" "/usr/fake" "/opt/atom"
  > /bin:/usr/bin:/usr/fake:/opt/atom
  $ paths join "/usr/bin/" "/bin"
  > /usr/bin:/bin
"""

NORMALIZE_DIR_HELP: Final[str] = "Normalize a directory."
NORMALIZE_HELP: Final[str] = "Normalize a path."
SPLIT_HELP: Final[str] = "Split a path into its directories."
FILTER_HELP: Final[str] = "Remove duplicate and non-existent directories from a path."
HAS_HELP: Final[str] = "Exit 0 if DIR appears in PATH, 1 otherwise."
PREPEND_HELP: Final[str] = "Prepend directories to a path, skipping ones already present."
APPEND_HELP: Final[str] = "Append directories to a path, skipping ones already present."
JOIN_HELP: Final[str] = "Join directories into a path."
HELP_HELP: Final[str] = "Show this message and exit."
VERSION_HELP: Final[str] = "Show the version and exit."

__all__ = [
    "APPEND_HELP",
    "APP_EPILOG",
    "APP_HELP",
    "FILTER_HELP",
    "HAS_HELP",
    "HELP_HELP",
    "JOIN_HELP",
    "NORMALIZE_DIR_HELP",
    "NORMALIZE_HELP",
    "PREPEND_HELP",
    "SPLIT_HELP",
    "VERSION_HELP",
]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path

import pytest

from pypaths.constants import (
    GLOBAL_NO_COLOR_ENV,
    JOBS_ENV,
    NO_COLOR_ENV,
    NO_EMOJI_ENV,
    SEPARATOR_ENV,
    SPLIT_STYLE_ENV,
)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test with a POSIX separator and no user overrides."""
    for name in (SPLIT_STYLE_ENV, JOBS_ENV, NO_COLOR_ENV, NO_EMOJI_ENV, GLOBAL_NO_COLOR_ENV):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv(SEPARATOR_ENV, ":")


@pytest.fixture
def exists_only() -> Callable[[Iterable[str]], Callable[[str], bool]]:
    """Return a factory building existence predicates backed by a fixed set."""

    def factory(existing: Iterable[str]) -> Callable[[str], bool]:
        known = frozenset(existing)
        return lambda path: path in known

    return factory


@pytest.fixture
def dir_tree(tmp_path: Path) -> dict[str, Path]:
    """Create two directories, a regular file and a missing path under ``tmp_path``."""
    first = tmp_path / "first"
    second = tmp_path / "second dir"
    first.mkdir()
    second.mkdir()
    regular = tmp_path / "regular.txt"
    regular.write_text("not a directory", encoding="utf-8")
    return {
        "first": first,
        "second": second,
        "file": regular,
        "missing": tmp_path / "missing",
    }

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for directory and path normalisation."""

from __future__ import annotations

import pytest

from pypaths.errors import InvalidPathError
from pypaths.normalize import normalize_dir, normalize_path, split_raw, validate_path

MESSY_PATH = ":/bin/:://a:/usr/bin:::á, é, ü/ñ@¿://bin://foo//bar/baz///"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("//foo//bar/baz///", "/foo/bar/baz"),
        ("/", "/"),
        ("///", "/"),
        ("", ""),
        ("  foo/ ", "foo"),
        ("a b//c", "a b/c"),
        ("\u00a0/usr/bin\u2003", "/usr/bin"),
        ("relative/dir/", "relative/dir"),
        ("y/ /", "y"),
        ("/ /", "/"),
    ],
)
def test_normalize_dir(raw: str, expected: str) -> None:
    assert normalize_dir(raw) == expected


def test_split_raw_consumes_whitespace_around_separators() -> None:
    assert split_raw(" a : b ", separator=":") == ["a", "b"]


def test_split_raw_keeps_inner_whitespace_and_drops_empty_tokens() -> None:
    assert split_raw("a b: :c", separator=":") == ["a b", "c"]


def test_normalize_path_collapses_separators() -> None:
    assert normalize_path(":/bin/::/usr/bin", separator=":") == "/bin:/usr/bin"
    assert normalize_path("a::b:::c", separator=":") == normalize_path("a:b:c", separator=":")


def test_normalize_path_handles_unicode_and_punctuation() -> None:
    expected = "/bin:/a:/usr/bin:á, é, ü/ñ@¿:/bin:/foo/bar/baz"
    assert normalize_path(MESSY_PATH, separator=":") == expected


def test_normalize_path_trims_whitespace_around_dirs() -> None:
    assert normalize_path("  /bin/ : /usr//bin/  ", separator=":") == "/bin:/usr/bin"


@pytest.mark.parametrize("raw", ["", "   ", ":::", " : : "])
def test_normalize_path_empty_results(raw: str) -> None:
    assert normalize_path(raw, separator=":") == ""


def test_normalize_path_custom_separator() -> None:
    assert normalize_path(";C:/x; ;;D:/y//;", separator=";") == "C:/x;D:/y"


@pytest.mark.parametrize(
    "raw",
    [MESSY_PATH, "a: :b", " / : // ", "x::y/ /:", "\t/opt//bin\t:\n/usr\n", "a\\ :b"],
)
def test_normalization_is_idempotent(raw: str) -> None:
    once = normalize_path(raw, separator=":")
    assert normalize_path(once, separator=":") == once
    for token in once.split(":"):
        assert normalize_dir(token) == token


@pytest.mark.parametrize("bad", [":a", "a:", "a::b", "a\x00b"])
def test_validate_path_rejects_malformed(bad: str) -> None:
    with pytest.raises(InvalidPathError):
        validate_path(bad, separator=":")


def test_validate_path_accepts_minimal_paths() -> None:
    validate_path("", separator=":")
    validate_path("/bin:/usr/bin", separator=":")

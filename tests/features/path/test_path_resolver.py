"""Tests for work path resolution."""

from __future__ import annotations

import re
from pathlib import Path

import pytest

from sharaku.features.path import (
    INVALID_PATH_NAME,
    invalid_path,
    is_invalid_path,
    normalize_lexically,
    path_taken,
    resolve_unique_work_path,
    resolve_work_path,
)
from sharaku.shared.work_metadata import WorkMetadata


def test_resolve_joins_rendered_template(library_root: Path) -> None:
    metadata = WorkMetadata(title="My Work", artist="Artist")

    resolved = resolve_work_path(library_root, "{artist}/{title}", metadata)

    assert resolved == library_root / "Artist" / "My Work"


@pytest.mark.parametrize("title", ["..", "../..", "../../etc", "a/../../b"])
def test_resolve_never_escapes_library_root(library_root: Path, title: str) -> None:
    metadata = WorkMetadata(title=title, artist="..")

    resolved = resolve_work_path(library_root, "{artist}/{title}", metadata)

    assert resolved.is_relative_to(library_root)


def test_resolve_neutralizes_literal_parent_segments(library_root: Path) -> None:
    metadata = WorkMetadata(title="Work")

    resolved = resolve_work_path(library_root, "../../{title}", metadata)

    assert resolved == library_root / "_" / "_" / "Work"
    assert not is_invalid_path(resolved, library_root)


def test_invalid_path_sentinel_lives_under_root(library_root: Path) -> None:
    sentinel = invalid_path(library_root)

    assert sentinel == library_root / INVALID_PATH_NAME
    assert is_invalid_path(sentinel, library_root)
    assert not is_invalid_path(library_root / "other", library_root)


def test_resolve_keeps_dot_segments_inside_root(library_root: Path) -> None:
    metadata = WorkMetadata(title="Work", artist="A")

    resolved = resolve_work_path(library_root, "./x/../{artist}/{title}", metadata)

    assert resolved == library_root / "_" / "x" / "_" / "A" / "Work"


def test_normalize_lexically_handles_parent_beyond_anchor() -> None:
    assert normalize_lexically(Path("/a/b/../../..")) == Path("/")
    assert normalize_lexically(Path("/a/./b/../c")) == Path("/a/c")


def test_resolve_unique_returns_base_when_free(library_root: Path) -> None:
    metadata = WorkMetadata(title="Free")

    assert resolve_unique_work_path(library_root, "{title}", metadata) == library_root / "Free"


def test_resolve_unique_appends_hex_suffix_on_collision(library_root: Path) -> None:
    (library_root / "Taken").mkdir()
    metadata = WorkMetadata(title="Taken")

    resolved = resolve_unique_work_path(library_root, "{title}", metadata)

    assert resolved.parent == library_root
    assert re.fullmatch(r"Taken_[0-9a-f]{4}", resolved.name)


def test_path_taken_matches_case_insensitively(tmp_path: Path) -> None:
    (tmp_path / "Artist").mkdir()

    assert path_taken(tmp_path / "Artist")
    assert path_taken(tmp_path / "ARTIST")
    assert not path_taken(tmp_path / "Other")
    assert not path_taken(tmp_path / "missing" / "child")

"""Fixtures for application service tests backed by a temporary database file."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from sharaku.application.services.library_service import LibraryService

ImageWriter = Callable[..., Path]


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "data" / "sharaku.db"


@pytest.fixture
def library(db_path: Path) -> LibraryService:
    return LibraryService(db_path=db_path)


@pytest.fixture
def configured_library(library: LibraryService, library_root: Path) -> LibraryService:
    _ = library.set_library_root(library_root)
    _ = library.set_directory_template("{artist}/{title}")
    return library


@pytest.fixture
def incoming(tmp_path: Path, write_image: ImageWriter) -> Path:
    """A scan root holding two image folders and one text-only folder."""

    root = tmp_path / "incoming"
    _ = write_image(root / "[Artist] First" / "1.png")
    _ = write_image(root / "[Artist] First" / "2.png")
    _ = write_image(root / "Second" / "cover.jpg")
    (root / "docs").mkdir()
    _ = (root / "docs" / "readme.txt").write_text("x")
    return root

"""Shared pytest fixtures for library tests."""

from __future__ import annotations

import sqlite3
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from PIL import Image

from sharaku.platform.db.daos.settings_dao import DIRECTORY_TEMPLATE_KEY, LIBRARY_ROOT_KEY, SettingsDAO
from sharaku.platform.db.db_manager import DatabaseManager

ImageWriter = Callable[..., Path]


@pytest.fixture
def db_manager() -> Generator[DatabaseManager, None, None]:
    """Database manager backed by an in-memory database."""

    manager = DatabaseManager(":memory:")
    manager.connect()
    yield manager
    manager.close()


@pytest.fixture
def conn(db_manager: DatabaseManager) -> sqlite3.Connection:
    return db_manager.require_connection()


@pytest.fixture
def write_image() -> ImageWriter:
    """Return a helper that writes a small real image file."""

    def _write(path: Path, size: tuple[int, int] = (40, 60), color: str = "red") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        Image.new("RGB", size, color).save(path)
        return path

    return _write


@pytest.fixture
def library_root(tmp_path: Path) -> Path:
    root = tmp_path / "library"
    root.mkdir()
    return root


@pytest.fixture
def configured_conn(conn: sqlite3.Connection, library_root: Path) -> sqlite3.Connection:
    """In-memory store with a library root and an ``{artist}/{title}`` template."""

    settings = SettingsDAO(conn)
    settings.set_setting(LIBRARY_ROOT_KEY, str(library_root))
    settings.set_setting(DIRECTORY_TEMPLATE_KEY, "{artist}/{title}")
    return conn

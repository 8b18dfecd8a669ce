"""Tests for loading work pages."""

from __future__ import annotations

import sqlite3
from pathlib import Path

import pytest

from sharaku.features.viewer import DEFAULT_CONTENT_TYPE, PageLoader, content_type_from_path
from sharaku.features.viewer.adapters.sqlite_repository import SqliteWorkReader
from sharaku.platform.db.daos.works_dao import WorksDAO
from sharaku.shared.errors import NotFoundError
from sharaku.shared.works import WorkRecord, WorkType


def _register(conn: sqlite3.Connection, path: Path, work_type: WorkType, pages: int) -> int:
    return WorksDAO(conn).insert_work(
        WorkRecord(
            title=path.name,
            path=str(path),
            work_type=work_type,
            page_count=pages,
            thumbnail=b"t",
        )
    )


@pytest.fixture
def folder_work(conn: sqlite3.Connection, tmp_path: Path) -> int:
    folder = tmp_path / "work"
    folder.mkdir()
    for name in ["10.png", "2.jpg", "1.gif", "notes.txt"]:
        _ = (folder / name).write_bytes(name.encode())
    return _register(conn, folder, WorkType.FOLDER, 3)


def test_loads_folder_pages_in_natural_order(conn: sqlite3.Connection, folder_work: int) -> None:
    loader = PageLoader(SqliteWorkReader(conn))

    pages = [loader.load_page(folder_work, index) for index in range(3)]

    assert [page.data for page in pages] == [b"1.gif", b"2.jpg", b"10.png"]
    assert [page.content_type for page in pages] == ["image/gif", "image/jpeg", "image/png"]


@pytest.mark.parametrize("page_index", [3, -1])
def test_page_out_of_range(conn: sqlite3.Connection, folder_work: int, page_index: int) -> None:
    loader = PageLoader(SqliteWorkReader(conn))

    with pytest.raises(NotFoundError, match="not found"):
        _ = loader.load_page(folder_work, page_index)


def test_unknown_work(conn: sqlite3.Connection) -> None:
    with pytest.raises(NotFoundError, match="Work 99 not found"):
        _ = PageLoader(SqliteWorkReader(conn)).load_page(99, 0)


def test_missing_folder(conn: sqlite3.Connection, tmp_path: Path) -> None:
    work_id = _register(conn, tmp_path / "vanished", WorkType.FOLDER, 1)

    with pytest.raises(NotFoundError, match="missing"):
        _ = PageLoader(SqliteWorkReader(conn)).load_page(work_id, 0)


def test_image_work_has_single_page(conn: sqlite3.Connection, tmp_path: Path) -> None:
    image = tmp_path / "single.webp"
    _ = image.write_bytes(b"webp-bytes")
    work_id = _register(conn, image, WorkType.IMAGE, 1)
    loader = PageLoader(SqliteWorkReader(conn))

    page = loader.load_page(work_id, 0)

    assert page.data == b"webp-bytes"
    assert page.content_type == "image/webp"
    with pytest.raises(NotFoundError):
        _ = loader.load_page(work_id, 1)


def test_unreadable_image_work(conn: sqlite3.Connection, tmp_path: Path) -> None:
    work_id = _register(conn, tmp_path / "gone.png", WorkType.IMAGE, 1)

    with pytest.raises(NotFoundError, match="Cannot read"):
        _ = PageLoader(SqliteWorkReader(conn)).load_page(work_id, 0)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("a.JPG", "image/jpeg"),
        ("a.jpeg", "image/jpeg"),
        ("a.bmp", "image/bmp"),
        ("a.tiff", DEFAULT_CONTENT_TYPE),
        ("noext", DEFAULT_CONTENT_TYPE),
    ],
)
def test_content_type_from_path(name: str, expected: str) -> None:
    assert content_type_from_path(name) == expected

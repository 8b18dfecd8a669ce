"""Tests for the works DAO."""

from __future__ import annotations

import sqlite3

import pytest
from pytest_mock import MockerFixture

from sharaku.platform.db.daos.works_dao import WorksDAO
from sharaku.shared.errors import DuplicateWorkPathError, NotFoundError, StoreError
from sharaku.shared.works import WorkRecord, WorkType


def _record(path: str, title: str = "Title", work_type: WorkType = WorkType.FOLDER) -> WorkRecord:
    return WorkRecord(
        title=title,
        path=path,
        work_type=work_type,
        page_count=3,
        thumbnail=b"thumb",
        artist="Artist",
        year=2021,
        genre="Comic",
        circle="Circle",
        origin="Original",
    )


def _set_created_at(conn: sqlite3.Connection, work_id: int, created_at: str) -> None:
    _ = conn.execute("UPDATE works SET created_at = ? WHERE id = ?", (created_at, work_id))
    conn.commit()


def test_insert_and_get_work(conn: sqlite3.Connection) -> None:
    dao = WorksDAO(conn)

    work_id = dao.insert_work(_record("/lib/a"))
    detail = dao.get_work(work_id)

    assert detail is not None
    assert detail.id == work_id
    assert detail.path == "/lib/a"
    assert detail.work_type is WorkType.FOLDER
    assert (detail.artist, detail.year, detail.genre, detail.circle, detail.origin) == (
        "Artist",
        2021,
        "Comic",
        "Circle",
        "Original",
    )
    assert detail.created_at
    assert dao.path_exists("/lib/a")
    assert not dao.path_exists("/lib/b")
    assert dao.get_thumbnail(work_id) == b"thumb"


def test_missing_work_returns_none(conn: sqlite3.Connection) -> None:
    dao = WorksDAO(conn)

    assert dao.get_work(404) is None
    assert dao.get_thumbnail(404) is None


def test_duplicate_path_is_rejected(conn: sqlite3.Connection) -> None:
    dao = WorksDAO(conn)
    _ = dao.insert_work(_record("/lib/a"))

    with pytest.raises(DuplicateWorkPathError) as excinfo:
        _ = dao.insert_work(_record("/lib/a", title="Other"))

    assert excinfo.value.path == "/lib/a"
    assert isinstance(excinfo.value, StoreError)
    assert len(dao.list_works()) == 1


def test_list_folder_works_skips_images(conn: sqlite3.Connection) -> None:
    dao = WorksDAO(conn)
    first = dao.insert_work(_record("/lib/a"))
    _ = dao.insert_work(_record("/lib/b.png", work_type=WorkType.IMAGE))
    third = dao.insert_work(_record("/lib/c"))

    assert [work.id for work in dao.list_folder_works()] == [first, third]


def test_update_work_path(conn: sqlite3.Connection) -> None:
    dao = WorksDAO(conn)
    work_id = dao.insert_work(_record("/lib/a"))

    dao.update_work_path(work_id, "/lib/new")

    detail = dao.get_work(work_id)
    assert detail is not None
    assert detail.path == "/lib/new"


def test_update_work_path_errors(conn: sqlite3.Connection) -> None:
    dao = WorksDAO(conn)
    first = dao.insert_work(_record("/lib/a"))
    _ = dao.insert_work(_record("/lib/b"))

    with pytest.raises(DuplicateWorkPathError):
        dao.update_work_path(first, "/lib/b")
    with pytest.raises(NotFoundError):
        dao.update_work_path(999, "/lib/z")


class TestListWorks:
    @pytest.fixture
    def dao(self, conn: sqlite3.Connection) -> WorksDAO:
        dao = WorksDAO(conn)
        for path, title, created_at in [
            ("/lib/1", "banana", "2025-01-02 00:00:00"),
            ("/lib/2", "Apple", "2025-01-03 00:00:00"),
            ("/lib/3", "cherry", "2025-01-01 00:00:00"),
        ]:
            work_id = dao.insert_work(_record(path, title=title))
            _set_created_at(conn, work_id, created_at)
        return dao

    def test_defaults_to_newest_first(self, dao: WorksDAO) -> None:
        assert [work.title for work in dao.list_works()] == ["Apple", "banana", "cherry"]

    def test_sorts_by_title(self, dao: WorksDAO) -> None:
        titles = [work.title for work in dao.list_works("title", "asc")]

        assert titles == ["Apple", "banana", "cherry"]

    def test_oldest_first(self, dao: WorksDAO) -> None:
        titles = [work.title for work in dao.list_works("created_at", "ASC")]

        assert titles == ["cherry", "banana", "Apple"]

    def test_unknown_sort_values_fall_back(self, dao: WorksDAO) -> None:
        fallback = dao.list_works("id; DROP TABLE works", "sideways")

        assert [work.title for work in fallback] == ["Apple", "banana", "cherry"]

    def test_ties_break_by_id(self, conn: sqlite3.Connection) -> None:
        dao = WorksDAO(conn)
        ids = [dao.insert_work(_record(f"/lib/{i}", title="same")) for i in range(3)]
        for work_id in ids:
            _set_created_at(conn, work_id, "2025-01-01 00:00:00")

        assert [work.id for work in dao.list_works()] == list(reversed(ids))
        assert [work.id for work in dao.list_works("title", "asc")] == ids


def test_sqlite_errors_become_store_errors(conn: sqlite3.Connection, mocker: MockerFixture) -> None:
    dao = WorksDAO(conn)
    broken = mocker.Mock()
    broken.cursor.side_effect = sqlite3.OperationalError("disk I/O error")
    dao.conn = broken

    with pytest.raises(StoreError):
        _ = dao.list_works()
    broken.rollback.assert_called_once()

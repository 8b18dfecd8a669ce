"""Test database functionality."""

import sqlite3
from pathlib import Path

import pytest

from sharaku.platform.db.db_manager import DatabaseManager


def _tables(conn: sqlite3.Connection) -> set[str]:
    cursor = conn.execute("SELECT name FROM sqlite_master WHERE type='table'")
    return {row[0] for row in cursor.fetchall()}


def test_schema_is_created(db_manager: DatabaseManager) -> None:
    conn = db_manager.require_connection()

    assert {"works", "settings"} <= _tables(conn)
    indexes = {row[0] for row in conn.execute("SELECT name FROM sqlite_master WHERE type='index'")}
    assert {"idx_works_type", "idx_works_created_at"} <= indexes


def test_works_type_is_constrained(db_manager: DatabaseManager) -> None:
    conn = db_manager.require_connection()

    with pytest.raises(sqlite3.IntegrityError):
        _ = conn.execute(
            "INSERT INTO works (title, path, type) VALUES (?, ?, ?)",
            ("t", "/p", "video"),
        )


def test_works_path_is_unique(db_manager: DatabaseManager) -> None:
    conn = db_manager.require_connection()
    _ = conn.execute("INSERT INTO works (title, path, type) VALUES ('a', '/p', 'folder')")

    with pytest.raises(sqlite3.IntegrityError):
        _ = conn.execute("INSERT INTO works (title, path, type) VALUES ('b', '/p', 'folder')")


def test_file_database_persists_and_reopens(tmp_path: Path) -> None:
    db_path = tmp_path / "nested" / "sharaku.db"

    with DatabaseManager(db_path) as first:
        conn = first.require_connection()
        _ = conn.execute("INSERT INTO settings (key, value) VALUES ('k', 'v')")
        conn.commit()

    assert db_path.exists()
    with DatabaseManager(str(db_path)) as second:
        row = second.require_connection().execute("SELECT value FROM settings WHERE key='k'").fetchone()
    assert row[0] == "v"


def test_context_manager_closes_connection(tmp_path: Path) -> None:
    manager = DatabaseManager(tmp_path / "x.db")
    with manager:
        assert manager.conn is not None
    assert manager.conn is None
    with pytest.raises(RuntimeError, match="not open"):
        _ = manager.require_connection()


def test_default_path_used_when_none(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SHARAKU_DATA_DIR", str(tmp_path))

    manager = DatabaseManager()

    assert manager.db_path == (tmp_path / "sharaku.db").resolve()


def test_unopenable_database_maps_to_permission_error(tmp_path: Path) -> None:
    blocker = tmp_path / "file"
    _ = blocker.write_text("not a directory")
    manager = DatabaseManager(":memory:")
    manager.db_path = str(blocker / "db.sqlite")

    with pytest.raises(PermissionError, match="Unable to open database"):
        manager.connect()

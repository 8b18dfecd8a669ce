"""SQLite-backed registry lookup for the scanner."""

from __future__ import annotations

import sqlite3

from sharaku.platform.db.daos.works_dao import WorksDAO

from ..usecases.ports import WorkRegistryReader


class SqliteWorkRegistry(WorkRegistryReader):
    """Check registration against the ``works`` table."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._dao: WorksDAO = WorksDAO(conn)

    def path_exists(self, path: str) -> bool:
        return self._dao.path_exists(path)


__all__ = ["SqliteWorkRegistry"]

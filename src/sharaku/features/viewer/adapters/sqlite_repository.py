"""SQLite-backed work lookup for the viewer."""

from __future__ import annotations

import sqlite3

from sharaku.platform.db.daos.works_dao import WorksDAO
from sharaku.shared.works import WorkDetail

from ..usecases.ports import WorkReader


class SqliteWorkReader(WorkReader):
    def __init__(self, conn: sqlite3.Connection) -> None:
        self._dao: WorksDAO = WorksDAO(conn)

    def get_work(self, work_id: int) -> WorkDetail | None:
        return self._dao.get_work(work_id)


__all__ = ["SqliteWorkReader"]

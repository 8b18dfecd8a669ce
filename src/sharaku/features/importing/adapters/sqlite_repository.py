"""SQLite-backed adapters for the import feature."""

from __future__ import annotations

import sqlite3

from sharaku.platform.db.daos.settings_dao import SettingsDAO
from sharaku.platform.db.daos.works_dao import WorksDAO
from sharaku.shared.works import AppSettings, WorkRecord

from ..usecases.ports import SettingsReader, WorkWriter


class SqliteWorkWriter(WorkWriter):
    """Insert works through ``WorksDAO``."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._dao: WorksDAO = WorksDAO(conn)

    def insert_work(self, record: WorkRecord) -> int:
        return self._dao.insert_work(record)


class SqliteSettingsReader(SettingsReader):
    """Read the settings snapshot through ``SettingsDAO``."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._dao: SettingsDAO = SettingsDAO(conn)

    def get_app_settings(self) -> AppSettings:
        return self._dao.get_app_settings()


__all__ = ["SqliteSettingsReader", "SqliteWorkWriter"]

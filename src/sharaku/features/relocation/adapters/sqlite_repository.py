"""SQLite-backed repository for relocation runs."""

from __future__ import annotations

import sqlite3

from sharaku.platform.db.daos.settings_dao import DIRECTORY_TEMPLATE_KEY, SettingsDAO
from sharaku.platform.db.daos.works_dao import WorksDAO
from sharaku.shared.works import AppSettings, WorkDetail

from ..usecases.ports import RelocationRepository


class SqliteRelocationRepository(RelocationRepository):
    """Adapter combining the works and settings DAOs."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._works: WorksDAO = WorksDAO(conn)
        self._settings: SettingsDAO = SettingsDAO(conn)

    def list_folder_works(self) -> list[WorkDetail]:
        return self._works.list_folder_works()

    def update_work_path(self, work_id: int, new_path: str) -> None:
        self._works.update_work_path(work_id, new_path)

    def get_app_settings(self) -> AppSettings:
        return self._settings.get_app_settings()

    def set_directory_template(self, template: str) -> None:
        self._settings.set_setting(DIRECTORY_TEMPLATE_KEY, template)


__all__ = ["SqliteRelocationRepository"]

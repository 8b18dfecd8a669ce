"""Application service for library settings, listings and page reads."""

from __future__ import annotations

from logging import Logger
from pathlib import Path
from typing import final

from sharaku.features.template import preview_template, validate_template
from sharaku.features.viewer import PageContent, PageLoader
from sharaku.features.viewer.adapters.sqlite_repository import SqliteWorkReader
from sharaku.platform.db.daos.settings_dao import (
    DIRECTORY_TEMPLATE_KEY,
    LIBRARY_ROOT_KEY,
    TYPE_LABEL_KEYS,
    SettingsDAO,
)
from sharaku.platform.db.daos.works_dao import WorksDAO
from sharaku.platform.db.db_manager import DatabaseManager
from sharaku.platform.logging import logger as default_logger
from sharaku.shared.errors import NotFoundError
from sharaku.shared.works import AppSettings, WorkDetail, WorkSummary, WorkType


@final
class LibraryService:
    """Façade over the metadata store for settings and read-only queries.

    Every call opens its own connection and closes it before returning.
    """

    _db_path: Path | str | None
    _logger: Logger

    def __init__(self, *, db_path: Path | str | None = None, logger: Logger | None = None) -> None:
        self._db_path = db_path
        self._logger = logger or default_logger

    # Settings -------------------------------------------------------------

    def get_settings(self) -> AppSettings:
        with DatabaseManager(self._db_path) as db:
            return SettingsDAO(db.require_connection()).get_app_settings()

    def set_library_root(self, path: Path | str) -> Path:
        """Store ``path`` as an absolute library root and return it."""

        root = Path(path).expanduser().resolve()
        with DatabaseManager(self._db_path) as db:
            SettingsDAO(db.require_connection()).set_setting(LIBRARY_ROOT_KEY, str(root))
        self._logger.info("Library root set to %s", root)
        return root

    def set_directory_template(self, template: str) -> str | None:
        """Validate and store ``template``; a blank value clears the setting.

        Returns:
            The stored template, or None when it was cleared.
        """

        trimmed = template.strip()
        if trimmed:
            validate_template(trimmed)
        with DatabaseManager(self._db_path) as db:
            dao = SettingsDAO(db.require_connection())
            if trimmed:
                dao.set_setting(DIRECTORY_TEMPLATE_KEY, trimmed)
            else:
                dao.delete_setting(DIRECTORY_TEMPLATE_KEY)
        self._logger.info("Directory template %s", f"set to {trimmed}" if trimmed else "cleared")
        return trimmed or None

    def set_type_label(self, work_type: WorkType, label: str) -> None:
        """Store the display label for ``work_type``; blank restores the default."""

        key = TYPE_LABEL_KEYS[work_type]
        with DatabaseManager(self._db_path) as db:
            dao = SettingsDAO(db.require_connection())
            if label.strip():
                dao.set_setting(key, label.strip())
            else:
                dao.delete_setting(key)

    def preview_template(self, template: str) -> str:
        """Render ``template`` against the sample metadata."""

        return preview_template(template)

    # Works ----------------------------------------------------------------

    def list_works(self, sort_by: str = "created_at", sort_order: str = "desc") -> list[WorkSummary]:
        with DatabaseManager(self._db_path) as db:
            return WorksDAO(db.require_connection()).list_works(sort_by, sort_order)

    def get_work(self, work_id: int) -> WorkDetail:
        with DatabaseManager(self._db_path) as db:
            work = WorksDAO(db.require_connection()).get_work(work_id)
        if work is None:
            raise NotFoundError(f"Work {work_id} not found")
        return work

    def get_thumbnail(self, work_id: int) -> bytes:
        with DatabaseManager(self._db_path) as db:
            thumbnail = WorksDAO(db.require_connection()).get_thumbnail(work_id)
        if thumbnail is None:
            raise NotFoundError(f"Thumbnail for work {work_id} not found")
        return thumbnail

    def load_page(self, work_id: int, page_index: int) -> PageContent:
        with DatabaseManager(self._db_path) as db:
            loader = PageLoader(SqliteWorkReader(db.require_connection()))
            return loader.load_page(work_id, page_index)


__all__ = ["LibraryService"]

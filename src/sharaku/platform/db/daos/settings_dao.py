"""src/sharaku/platform/db/daos/settings_dao.py
What: Key/value access to the ``settings`` table.
Why: Library root, directory template and type labels persist next to the works.
"""

from __future__ import annotations

import sqlite3
from typing import Final, final

from sharaku.shared.works import DEFAULT_TYPE_LABELS, AppSettings, WorkType

from ._errors import store_failure

LIBRARY_ROOT_KEY: Final[str] = "library_root"
DIRECTORY_TEMPLATE_KEY: Final[str] = "directory_template"
TYPE_LABEL_KEYS: Final[dict[WorkType, str]] = {
    WorkType.IMAGE: "type_label_image",
    WorkType.FOLDER: "type_label_folder",
}


@final
class SettingsDAO:
    """Data access object for the settings table."""

    conn: sqlite3.Connection

    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn = conn

    def get_setting(self, key: str) -> str | None:
        """Return the stored value for ``key`` or None."""

        try:
            cursor = self.conn.cursor()
            _ = cursor.execute("SELECT value FROM settings WHERE key = ?", (key,))
            row = cursor.fetchone()
        except sqlite3.Error as e:
            raise store_failure(self.conn, f"read setting {key}", e) from e
        return str(row[0]) if row is not None else None

    def set_setting(self, key: str, value: str) -> None:
        """Insert or replace the value stored under ``key``."""

        try:
            cursor = self.conn.cursor()
            _ = cursor.execute(
                """
                INSERT INTO settings (key, value) VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value
                """,
                (key, value),
            )
            self.conn.commit()
        except sqlite3.Error as e:
            raise store_failure(self.conn, f"write setting {key}", e) from e

    def delete_setting(self, key: str) -> None:
        """Remove ``key``; missing keys are ignored."""

        try:
            cursor = self.conn.cursor()
            _ = cursor.execute("DELETE FROM settings WHERE key = ?", (key,))
            self.conn.commit()
        except sqlite3.Error as e:
            raise store_failure(self.conn, f"delete setting {key}", e) from e

    def get_app_settings(self) -> AppSettings:
        """Load the settings snapshot with label defaults applied."""

        return AppSettings(
            library_root=self.get_setting(LIBRARY_ROOT_KEY),
            directory_template=self.get_setting(DIRECTORY_TEMPLATE_KEY),
            type_label_image=self.get_setting(TYPE_LABEL_KEYS[WorkType.IMAGE])
            or DEFAULT_TYPE_LABELS[WorkType.IMAGE],
            type_label_folder=self.get_setting(TYPE_LABEL_KEYS[WorkType.FOLDER])
            or DEFAULT_TYPE_LABELS[WorkType.FOLDER],
        )


__all__ = [
    "DIRECTORY_TEMPLATE_KEY",
    "LIBRARY_ROOT_KEY",
    "SettingsDAO",
    "TYPE_LABEL_KEYS",
]

"""SQLite connection owner for the metadata store.

The store has two tables: ``works`` (one row per imported work, with its
thumbnail) and ``settings`` (string key/value pairs such as the library root
and the directory template).
"""

import sqlite3
from pathlib import Path
from typing import Any, Final, final

from sharaku.config.paths import default_db_path
from sharaku.platform.filesystem import ensure_parent_directory
from sharaku.platform.logging import logger

IN_MEMORY: Final[str] = ":memory:"

LOCK_TIMEOUT_SECONDS: Final[float] = 30.0

_PRAGMAS: Final[tuple[str, ...]] = (
    "PRAGMA foreign_keys = ON",
    "PRAGMA synchronous = NORMAL",
    "PRAGMA journal_mode = WAL",
    f"PRAGMA busy_timeout = {int(LOCK_TIMEOUT_SECONDS * 1000)}",
)

SCHEMA: Final[str] = """
CREATE TABLE IF NOT EXISTS works (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL,
    path TEXT NOT NULL UNIQUE,
    type TEXT NOT NULL CHECK (type IN ('image', 'folder')),
    page_count INTEGER NOT NULL DEFAULT 1,
    thumbnail BLOB,
    artist TEXT,
    year INTEGER,
    genre TEXT,
    circle TEXT,
    origin TEXT,
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP
);

CREATE TABLE IF NOT EXISTS settings (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_works_type ON works(type);
CREATE INDEX IF NOT EXISTS idx_works_created_at ON works(created_at);
"""


@final
class DatabaseManager:
    """Own one SQLite connection and make sure the schema exists."""

    db_path: str | Path
    conn: sqlite3.Connection | None

    def __init__(self, db_path: Path | str | None = None) -> None:
        """
        Args:
            db_path: Database file, ``":memory:"`` for a throwaway store, or
                None for ``default_db_path()``.
        """
        if db_path is None:
            self.db_path = default_db_path()
        elif db_path == IN_MEMORY:
            self.db_path = IN_MEMORY
        else:
            self.db_path = Path(db_path)
        self.conn = None

    def connect(self) -> None:
        """Open the connection, apply pragmas and create missing tables.

        Raises:
            PermissionError: SQLite cannot open the file at ``db_path``.
            sqlite3.Error: Any other failure while opening or migrating.
        """
        if isinstance(self.db_path, Path):
            _ = ensure_parent_directory(self.db_path)

        try:
            conn = self._open()
            for pragma in _PRAGMAS:
                _ = conn.execute(pragma)
            self.conn = conn
            self._create_schema(conn)
        except sqlite3.Error as e:
            logger.error("Failed to connect to database %s: %s", self.db_path, e)
            raise

    def _open(self) -> sqlite3.Connection:
        try:
            # IMMEDIATE takes the write lock at BEGIN; services call in from worker threads.
            return sqlite3.connect(
                self.db_path,
                timeout=LOCK_TIMEOUT_SECONDS,
                isolation_level="IMMEDIATE",
                check_same_thread=False,
            )
        except sqlite3.OperationalError as e:
            if "unable to open database file" in str(e):
                raise PermissionError(f"Unable to open database at {self.db_path}") from e
            raise

    @staticmethod
    def _create_schema(conn: sqlite3.Connection) -> None:
        try:
            _ = conn.executescript(SCHEMA)
            conn.commit()
        except sqlite3.Error as e:
            logger.error("Failed to initialize schema: %s", e)
            conn.rollback()
            raise
        logger.debug("Database schema ready")

    def close(self) -> None:
        if self.conn is None:
            return
        try:
            self.conn.close()
        except sqlite3.Error as e:
            logger.error("Failed to close database connection: %s", e)
            return
        self.conn = None

    def __enter__(self) -> "DatabaseManager":
        self.connect()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any | None,
    ) -> None:
        self.close()

    def require_connection(self) -> sqlite3.Connection:
        """Return the open connection; raise RuntimeError when closed."""
        if self.conn is None:
            raise RuntimeError("Database connection is not open")
        return self.conn

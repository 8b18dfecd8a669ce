"""src/sharaku/platform/db/daos/works_dao.py
What: Read and write rows of the ``works`` table.
Why: Importer, relocator, scanner and library queries share one SQL surface.
"""

from __future__ import annotations

import sqlite3
from typing import Final, final

from sharaku.shared.errors import DuplicateWorkPathError, NotFoundError
from sharaku.shared.works import WorkDetail, WorkRecord, WorkSummary, WorkType

from ._errors import store_failure

SORT_COLUMNS: Final[frozenset[str]] = frozenset({"title", "created_at"})
SORT_ORDERS: Final[frozenset[str]] = frozenset({"asc", "desc"})
DEFAULT_SORT_COLUMN: Final[str] = "created_at"
DEFAULT_SORT_ORDER: Final[str] = "desc"

_DETAIL_COLUMNS: Final[str] = (
    "id, title, path, type, page_count, created_at, artist, year, genre, circle, origin"
)


@final
class WorksDAO:
    """Data access object for the works table."""

    conn: sqlite3.Connection

    def __init__(self, conn: sqlite3.Connection) -> None:
        """Initialize DAO.

        Args:
            conn: Database connection.
        """
        self.conn = conn

    def path_exists(self, path: str) -> bool:
        """Return True when a work is registered at exactly ``path``."""

        try:
            cursor = self.conn.cursor()
            _ = cursor.execute("SELECT 1 FROM works WHERE path = ?", (path,))
            return cursor.fetchone() is not None
        except sqlite3.Error as e:
            raise store_failure(self.conn, f"check work path {path}", e) from e

    def insert_work(self, record: WorkRecord) -> int:
        """Insert a work and return its id.

        Raises:
            DuplicateWorkPathError: A work is already registered at ``record.path``.
            StoreError: Any other SQLite failure.
        """

        try:
            cursor = self.conn.cursor()
            _ = cursor.execute(
                """
                INSERT INTO works (
                    title, path, type, page_count, thumbnail,
                    artist, year, genre, circle, origin
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    record.title,
                    record.path,
                    record.work_type.value,
                    record.page_count,
                    record.thumbnail,
                    record.artist,
                    record.year,
                    record.genre,
                    record.circle,
                    record.origin,
                ),
            )
            self.conn.commit()
            return int(cursor.lastrowid or 0)
        except sqlite3.IntegrityError as e:
            _ = store_failure(self.conn, f"insert work at {record.path}", e)
            raise DuplicateWorkPathError(record.path) from e
        except sqlite3.Error as e:
            raise store_failure(self.conn, f"insert work at {record.path}", e) from e

    def list_folder_works(self) -> list[WorkDetail]:
        """Return every folder work ordered by id."""

        try:
            cursor = self.conn.cursor()
            _ = cursor.execute(
                f"SELECT {_DETAIL_COLUMNS} FROM works WHERE type = ? ORDER BY id",
                (WorkType.FOLDER.value,),
            )
            return [self._to_detail(row) for row in cursor.fetchall()]
        except sqlite3.Error as e:
            raise store_failure(self.conn, "list folder works", e) from e

    def update_work_path(self, work_id: int, new_path: str) -> None:
        """Point work ``work_id`` at ``new_path``.

        Raises:
            NotFoundError: No work has id ``work_id``.
            DuplicateWorkPathError: Another work already uses ``new_path``.
        """

        try:
            cursor = self.conn.cursor()
            _ = cursor.execute(
                "UPDATE works SET path = ? WHERE id = ?",
                (new_path, work_id),
            )
            updated = cursor.rowcount
            self.conn.commit()
        except sqlite3.IntegrityError as e:
            _ = store_failure(self.conn, f"update path of work {work_id}", e)
            raise DuplicateWorkPathError(new_path) from e
        except sqlite3.Error as e:
            raise store_failure(self.conn, f"update path of work {work_id}", e) from e

        if updated == 0:
            raise NotFoundError(f"Work {work_id} not found")

    def list_works(self, sort_by: str = DEFAULT_SORT_COLUMN, sort_order: str = DEFAULT_SORT_ORDER) -> list[WorkSummary]:
        """List works for the library view.

        Unknown ``sort_by`` values fall back to ``created_at`` and unknown
        ``sort_order`` values fall back to ``desc``; both are whitelisted before
        they reach the SQL text.
        """

        column = sort_by if sort_by in SORT_COLUMNS else DEFAULT_SORT_COLUMN
        order = sort_order.lower() if sort_order.lower() in SORT_ORDERS else DEFAULT_SORT_ORDER
        try:
            cursor = self.conn.cursor()
            _ = cursor.execute(
                f"""
                SELECT id, title, type, page_count, created_at
                FROM works
                ORDER BY {column} {order.upper()}, id {order.upper()}
                """
            )
            return [
                WorkSummary(
                    id=row[0],
                    title=row[1],
                    work_type=WorkType(row[2]),
                    page_count=row[3],
                    created_at=str(row[4]),
                )
                for row in cursor.fetchall()
            ]
        except sqlite3.Error as e:
            raise store_failure(self.conn, "list works", e) from e

    def get_work(self, work_id: int) -> WorkDetail | None:
        """Fetch a work by id."""

        try:
            cursor = self.conn.cursor()
            _ = cursor.execute(
                f"SELECT {_DETAIL_COLUMNS} FROM works WHERE id = ?",
                (work_id,),
            )
            row = cursor.fetchone()
        except sqlite3.Error as e:
            raise store_failure(self.conn, f"fetch work {work_id}", e) from e
        return self._to_detail(row) if row is not None else None

    def get_thumbnail(self, work_id: int) -> bytes | None:
        """Fetch the stored thumbnail blob for a work."""

        try:
            cursor = self.conn.cursor()
            _ = cursor.execute("SELECT thumbnail FROM works WHERE id = ?", (work_id,))
            row = cursor.fetchone()
        except sqlite3.Error as e:
            raise store_failure(self.conn, f"fetch thumbnail of work {work_id}", e) from e
        if row is None or row[0] is None:
            return None
        return bytes(row[0])

    @staticmethod
    def _to_detail(row: tuple[object, ...]) -> WorkDetail:
        work_id, title, path, work_type, page_count, created_at, artist, year, genre, circle, origin = row
        return WorkDetail(
            id=int(work_id),  # type: ignore[arg-type]
            title=str(title),
            path=str(path),
            work_type=WorkType(str(work_type)),
            page_count=int(page_count),  # type: ignore[arg-type]
            created_at=str(created_at),
            artist=artist if isinstance(artist, str) else None,
            year=year if isinstance(year, int) else None,
            genre=genre if isinstance(genre, str) else None,
            circle=circle if isinstance(circle, str) else None,
            origin=origin if isinstance(origin, str) else None,
        )


__all__ = ["WorksDAO", "SORT_COLUMNS", "SORT_ORDERS"]

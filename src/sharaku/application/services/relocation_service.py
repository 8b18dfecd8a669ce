"""Application service wiring adapters into the relocation use case."""

from __future__ import annotations

from logging import Logger
from pathlib import Path
from typing import final

from sharaku.features.importing.adapters.local_filesystem import LocalFileSystemGateway
from sharaku.features.relocation import (
    RelocationEvent,
    RelocationPlanItem,
    RelocationSummary,
    WorkRelocator,
)
from sharaku.features.relocation.adapters.sqlite_repository import SqliteRelocationRepository
from sharaku.platform.db.db_manager import DatabaseManager
from sharaku.platform.logging import logger as default_logger
from sharaku.shared.errors import RelocationError
from sharaku.shared.filesystem import FileSystemGateway
from sharaku.shared.progress import ProgressSink


@final
class RelocationService:
    """Application façade for previewing and running relocations."""

    _db_path: Path | str | None
    _filesystem: FileSystemGateway
    _logger: Logger

    def __init__(
        self,
        *,
        db_path: Path | str | None = None,
        filesystem: FileSystemGateway | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._db_path = db_path
        self._filesystem = filesystem or LocalFileSystemGateway()
        self._logger = logger or default_logger

    def preview(self, new_template: str, library_root: Path | None = None) -> list[RelocationPlanItem]:
        """Plan a relocation to ``new_template`` without moving anything.

        Raises:
            RelocationError: No ``library_root`` was given and none is stored.
            TemplateValidationError: ``new_template`` is malformed.
        """

        with DatabaseManager(self._db_path) as db:
            repository = SqliteRelocationRepository(db.require_connection())
            root = library_root
            if root is None:
                stored = repository.get_app_settings().library_root
                if not stored:
                    raise RelocationError("Library root is not set")
                root = Path(stored)
            return self._relocator(repository).preview_relocation(root, new_template.strip())

    def execute(
        self,
        new_template: str,
        progress: ProgressSink[RelocationEvent] | None = None,
    ) -> RelocationSummary:
        with DatabaseManager(self._db_path) as db:
            repository = SqliteRelocationRepository(db.require_connection())
            return self._relocator(repository).execute_relocation(new_template.strip(), progress)

    def _relocator(self, repository: SqliteRelocationRepository) -> WorkRelocator:
        return WorkRelocator(repository=repository, filesystem=self._filesystem, logger=self._logger)


__all__ = ["RelocationService"]

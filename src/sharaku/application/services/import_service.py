"""Application service wiring adapters into the scanner and import use cases."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import replace
from logging import Logger
from pathlib import Path
from typing import final

from sharaku.features.importing import (
    BulkImportEvent,
    BulkImportSummary,
    ImportRequest,
    ImportResult,
    ThumbnailGenerator,
    WorkImporter,
    preview_import_path,
)
from sharaku.features.importing.adapters.local_filesystem import LocalFileSystemGateway
from sharaku.features.importing.adapters.sqlite_repository import (
    SqliteSettingsReader,
    SqliteWorkWriter,
)
from sharaku.features.scanner import DiscoveredFolder, ScanEvent, discover_image_folders
from sharaku.features.scanner.adapters.sqlite_registry import SqliteWorkRegistry
from sharaku.platform.db.daos.settings_dao import SettingsDAO
from sharaku.platform.db.db_manager import DatabaseManager
from sharaku.platform.imaging.thumbnail import PillowThumbnailGenerator
from sharaku.platform.logging import logger as default_logger
from sharaku.shared.errors import NotFoundError
from sharaku.shared.filesystem import FileSystemGateway
from sharaku.shared.progress import ProgressSink
from sharaku.shared.work_metadata import WorkMetadata
from sharaku.shared.works import WorkType


@final
class ImportService:
    """Application façade for discovering and importing image folders."""

    _db_path: Path | str | None
    _thumbnails: ThumbnailGenerator
    _filesystem: FileSystemGateway
    _logger: Logger

    def __init__(
        self,
        *,
        db_path: Path | str | None = None,
        thumbnail_factory: Callable[[], ThumbnailGenerator] | None = None,
        filesystem: FileSystemGateway | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._db_path = db_path
        self._thumbnails = (thumbnail_factory or PillowThumbnailGenerator)()
        self._filesystem = filesystem or LocalFileSystemGateway()
        self._logger = logger or default_logger

    def discover(
        self,
        root: Path,
        progress: ProgressSink[ScanEvent] | None = None,
    ) -> list[DiscoveredFolder]:
        """List image folders under ``root`` with their registration status."""

        with DatabaseManager(self._db_path) as db:
            registry = SqliteWorkRegistry(db.require_connection())
            return discover_image_folders(root, registry, progress, logger=self._logger)

    def import_work(self, request: ImportRequest) -> ImportResult:
        with DatabaseManager(self._db_path) as db:
            return self._importer(db).import_work(request)

    def bulk_import(
        self,
        requests: Sequence[ImportRequest],
        progress: ProgressSink[BulkImportEvent] | None = None,
    ) -> BulkImportSummary:
        with DatabaseManager(self._db_path) as db:
            return self._importer(db).bulk_import(requests, progress)

    def preview_import_path(self, metadata: WorkMetadata) -> Path:
        """Destination an import with ``metadata`` would target.

        Raises:
            NotFoundError: The library root or directory template is not set.
            TemplateValidationError: The stored template is malformed.
        """

        with DatabaseManager(self._db_path) as db:
            settings = SettingsDAO(db.require_connection()).get_app_settings()
        if not settings.library_root:
            raise NotFoundError("Library root is not set")
        if not settings.directory_template:
            raise NotFoundError("Directory template is not set")
        if metadata.work_type is None:
            metadata = replace(metadata, work_type=settings.type_label(WorkType.FOLDER))
        return preview_import_path(Path(settings.library_root), settings.directory_template, metadata)

    def _importer(self, db: DatabaseManager) -> WorkImporter:
        conn = db.require_connection()
        return WorkImporter(
            works=SqliteWorkWriter(conn),
            settings=SqliteSettingsReader(conn),
            thumbnails=self._thumbnails,
            filesystem=self._filesystem,
            logger=self._logger,
        )


__all__ = ["ImportService"]

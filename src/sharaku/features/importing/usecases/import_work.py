"""Use cases importing image folders into the library."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from logging import Logger
from pathlib import Path

from sharaku.config.settings import UNIQUE_DESTINATION_ATTEMPTS
from sharaku.features.path import is_invalid_path, resolve_unique_work_path, resolve_work_path
from sharaku.features.template import validate_template
from sharaku.platform.logging import logger as default_logger
from sharaku.shared.errors import SharakuError, ThumbnailError, WorkImportError
from sharaku.shared.filesystem import FileSystemGateway
from sharaku.shared.log_events import LibraryEvent
from sharaku.shared.progress import ProgressSink, emit
from sharaku.shared.work_metadata import WorkMetadata
from sharaku.shared.works import WorkRecord, WorkType

from ..domain.models import (
    BulkImportCompleted,
    BulkImportError,
    BulkImportEvent,
    BulkImportImporting,
    BulkImportStarted,
    BulkImportSummary,
    ImportMode,
    ImportRequest,
    ImportResult,
)
from .ports import SettingsReader, ThumbnailGenerator, WorkWriter


def paths_overlap(first: Path, second: Path) -> bool:
    """Return True when either path is inside (or equal to) the other."""

    a = first.resolve()
    b = second.resolve()
    return a.is_relative_to(b) or b.is_relative_to(a)


def preview_import_path(library_root: Path, template: str, metadata: WorkMetadata) -> Path:
    """Destination an import would use before uniquification."""

    validate_template(template)
    return resolve_work_path(library_root, template, metadata)


class WorkImporter:
    """Copy a folder of images into the library and register it."""

    _works: WorkWriter
    _settings: SettingsReader
    _thumbnails: ThumbnailGenerator
    _filesystem: FileSystemGateway
    _logger: Logger
    _max_attempts: int

    def __init__(
        self,
        *,
        works: WorkWriter,
        settings: SettingsReader,
        thumbnails: ThumbnailGenerator,
        filesystem: FileSystemGateway,
        logger: Logger | None = None,
        max_attempts: int = UNIQUE_DESTINATION_ATTEMPTS,
    ) -> None:
        self._works = works
        self._settings = settings
        self._thumbnails = thumbnails
        self._filesystem = filesystem
        self._logger = logger or default_logger
        self._max_attempts = max(1, max_attempts)

    def import_work(self, request: ImportRequest) -> ImportResult:
        """Import ``request.source_path`` as a folder work.

        Validation, settings and thumbnail failures abort before anything is
        written. Once the destination exists, a failed copy or store insert
        removes it again and the error propagates. In move mode the source
        images are deleted only after the record is stored.

        Raises:
            WorkImportError: Validation failed or the destination is unusable.
            TemplateValidationError: The stored template is malformed.
            StoreError: The work could not be registered.
            OSError: Copying into the library failed.
        """

        source = request.source_path
        if not self._filesystem.is_dir(source):
            raise WorkImportError(source, "source is not a directory")
        if not request.title.strip():
            raise WorkImportError(source, "title is required")

        images = self._filesystem.list_images(source)
        if not images:
            raise WorkImportError(source, "no image files in folder")

        settings = self._settings.get_app_settings()
        if not settings.library_root:
            raise WorkImportError(source, "library root is not set")
        if not settings.directory_template:
            raise WorkImportError(source, "directory template is not set")
        template = settings.directory_template
        validate_template(template)

        library_root = Path(settings.library_root)
        metadata = request.to_metadata(settings.type_label(WorkType.FOLDER))
        candidate = self._checked_destination(source, library_root, template, metadata)

        self._logger.info(
            "Importing %s",
            request.title,
            extra={"library_event": LibraryEvent.IMPORT_START, "display_path": str(source)},
        )

        try:
            thumbnail = self._thumbnails.generate(images[0])
        except ThumbnailError as e:
            raise WorkImportError(source, f"thumbnail generation failed: {e}") from e

        destination = self._reserve_destination(source, library_root, template, metadata, candidate)

        try:
            self._filesystem.copy_images(images, destination)
        except OSError as e:
            self._logger.error(
                "Copy into library failed for %s: %s",
                request.title,
                e,
                extra={"library_event": LibraryEvent.IMPORT_ERROR},
            )
            self._rollback(destination, library_root)
            raise

        record = WorkRecord(
            title=request.title,
            path=str(destination),
            work_type=WorkType.FOLDER,
            page_count=len(images),
            thumbnail=thumbnail,
            artist=request.artist,
            year=request.year,
            genre=request.genre,
            circle=request.circle,
            origin=request.origin,
        )
        try:
            _ = self._works.insert_work(record)
        except SharakuError:
            self._rollback(destination, library_root)
            raise

        if request.mode is ImportMode.MOVE:
            self._remove_source(source, images)

        self._logger.info(
            "Imported %s (%d pages)",
            request.title,
            len(images),
            extra={
                "library_event": LibraryEvent.IMPORT_SUCCESS,
                "display_path": str(destination),
                "display_base": str(library_root),
            },
        )
        return ImportResult(destination_path=destination, page_count=len(images))

    def bulk_import(
        self,
        requests: Sequence[ImportRequest],
        progress: ProgressSink[BulkImportEvent] | None = None,
    ) -> BulkImportSummary:
        """Import each request in order; one failure never stops the batch."""

        total = len(requests)
        emit(progress, BulkImportStarted(total=total))

        succeeded = 0
        failed = 0
        for index, request in enumerate(requests, start=1):
            emit(progress, BulkImportImporting(current=index, total=total, title=request.title))
            try:
                _ = self.import_work(request)
                succeeded += 1
            except (SharakuError, OSError) as e:
                failed += 1
                message = str(e) or e.__class__.__name__
                self._logger.warning(
                    "Bulk import skipped %s: %s",
                    request.title,
                    message,
                    extra={"library_event": LibraryEvent.IMPORT_ERROR},
                )
                emit(progress, BulkImportError(title=request.title, message=message))

        emit(progress, BulkImportCompleted(succeeded=succeeded, failed=failed))
        return BulkImportSummary(succeeded=succeeded, failed=failed)

    def _checked_destination(
        self,
        source: Path,
        library_root: Path,
        template: str,
        metadata: WorkMetadata,
    ) -> Path:
        candidate = resolve_unique_work_path(library_root, template, metadata)
        if is_invalid_path(candidate, library_root):
            raise WorkImportError(source, "destination resolves outside the library root")
        if paths_overlap(source, candidate):
            raise WorkImportError(source, "source and destination overlap")
        return candidate

    def _reserve_destination(
        self,
        source: Path,
        library_root: Path,
        template: str,
        metadata: WorkMetadata,
        first_candidate: Path,
    ) -> Path:
        """Create the destination exclusively, re-resolving after lost races."""

        candidate = first_candidate
        for attempt in range(1, self._max_attempts + 1):
            try:
                self._filesystem.create_directory_exclusive(candidate)
                return candidate
            except FileExistsError:
                self._logger.debug(
                    "Destination %s appeared concurrently (attempt %d/%d)",
                    candidate,
                    attempt,
                    self._max_attempts,
                )
            candidate = self._checked_destination(source, library_root, template, metadata)
        raise WorkImportError(source, "could not reserve a unique destination directory")

    def _rollback(self, destination: Path, library_root: Path) -> None:
        if self._filesystem.remove_tree(destination):
            self._filesystem.remove_empty_ancestors(destination.parent, library_root)
        self._logger.warning(
            "Rolled back partial import",
            extra={
                "library_event": LibraryEvent.IMPORT_ROLLBACK,
                "display_path": str(destination),
                "display_base": str(library_root),
            },
        )

    def _remove_source(self, source: Path, images: Iterable[Path]) -> None:
        files = list(images)
        removed = self._filesystem.remove_files(files)
        emptied = self._filesystem.remove_directory_if_empty(source)
        self._logger.info(
            "Removed %d/%d source images%s",
            removed,
            len(files),
            "" if emptied else " (source directory kept)",
            extra={"library_event": LibraryEvent.IMPORT_SOURCE_CLEANUP, "display_path": str(source)},
        )


__all__ = ["WorkImporter", "paths_overlap", "preview_import_path"]

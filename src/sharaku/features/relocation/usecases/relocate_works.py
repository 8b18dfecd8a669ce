"""
Summary: Move every folder work to the directory its metadata renders to.
Why: Changing the directory template must keep disk and store in agreement.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import Logger
from pathlib import Path

from sharaku.features.path import RelocationPlanItem, compute_relocation_plan
from sharaku.features.template import validate_template
from sharaku.platform.logging import logger as default_logger
from sharaku.shared.errors import RelocationError, SharakuError
from sharaku.shared.filesystem import FileSystemGateway
from sharaku.shared.log_events import LibraryEvent
from sharaku.shared.progress import ProgressSink, emit
from sharaku.shared.works import WorkType

from ..domain.models import (
    RelocationCompleted,
    RelocationEvent,
    RelocationFailed,
    RelocationMoving,
    RelocationStarted,
    RelocationSummary,
)
from .ports import RelocationRepository


@dataclass(slots=True)
class _Tally:
    relocated: int = 0
    skipped: int = 0
    failed: int = 0


class WorkRelocator:
    """Plan and execute relocations through injected ports."""

    _repository: RelocationRepository
    _filesystem: FileSystemGateway
    _logger: Logger

    def __init__(
        self,
        *,
        repository: RelocationRepository,
        filesystem: FileSystemGateway,
        logger: Logger | None = None,
    ) -> None:
        self._repository = repository
        self._filesystem = filesystem
        self._logger = logger or default_logger

    def preview_relocation(self, library_root: Path, new_template: str) -> list[RelocationPlanItem]:
        """Return the plan for ``new_template`` without touching the filesystem."""

        validate_template(new_template)
        settings = self._repository.get_app_settings()
        return compute_relocation_plan(
            self._repository.list_folder_works(),
            library_root,
            new_template,
            settings.type_label(WorkType.FOLDER),
            logger=self._logger,
        )

    def execute_relocation(
        self,
        new_template: str,
        progress: ProgressSink[RelocationEvent] | None = None,
    ) -> RelocationSummary:
        """Relocate all folder works to match ``new_template``.

        Each work is copied to its new directory before the store is updated,
        and the old files are removed only after the update succeeds. Works
        whose directory has vanished are skipped. A work with a staging step
        counts once, when its last step succeeds; if an earlier step fails its
        remaining steps are dropped. The template is persisted once the loop
        finishes, whatever the per-item outcomes.

        Raises:
            TemplateValidationError: ``new_template`` is malformed.
            RelocationError: The library root is not configured.
        """

        validate_template(new_template)
        settings = self._repository.get_app_settings()
        if not settings.library_root:
            raise RelocationError("Library root is not set")
        library_root = Path(settings.library_root)

        plan = compute_relocation_plan(
            self._repository.list_folder_works(),
            library_root,
            new_template,
            settings.type_label(WorkType.FOLDER),
            logger=self._logger,
        )
        total = len(plan)
        emit(progress, RelocationStarted(total=total))
        self._logger.info(
            "Relocating works in %d steps",
            total,
            extra={"library_event": LibraryEvent.RELOCATION_START, "display_path": str(library_root)},
        )

        tally = _Tally()
        last_step = {item.work_id: index for index, item in enumerate(plan, start=1)}
        abandoned: set[int] = set()
        for index, item in enumerate(plan, start=1):
            emit(progress, RelocationMoving(current=index, total=total, title=item.title))
            if item.work_id in abandoned:
                continue
            if not self._relocate_one(item, library_root, tally, progress):
                # Later steps of this work would start from a path it never reached.
                abandoned.add(item.work_id)
            elif index == last_step[item.work_id]:
                tally.relocated += 1

        self._repository.set_directory_template(new_template)

        emit(
            progress,
            RelocationCompleted(relocated=tally.relocated, skipped=tally.skipped, failed=tally.failed),
        )
        self._logger.info(
            "Relocation finished: %d relocated, %d skipped, %d failed",
            tally.relocated,
            tally.skipped,
            tally.failed,
            extra={"library_event": LibraryEvent.RELOCATION_COMPLETE},
        )
        return RelocationSummary(relocated=tally.relocated, skipped=tally.skipped, failed=tally.failed)

    def _relocate_one(
        self,
        item: RelocationPlanItem,
        library_root: Path,
        tally: _Tally,
        progress: ProgressSink[RelocationEvent] | None,
    ) -> bool:
        old_path = Path(item.old_path)
        new_path = Path(item.new_path)

        if not self._filesystem.exists(old_path):
            tally.skipped += 1
            self._logger.warning(
                "Skipping %s: directory is missing",
                item.title,
                extra={"library_event": LibraryEvent.RELOCATION_SKIP, "display_path": item.old_path},
            )
            return False

        try:
            images = self._filesystem.list_images(old_path)
            self._filesystem.create_directory_exclusive(new_path)
        except OSError as e:
            # Nothing was created at new_path, so there is nothing to undo.
            self._fail(item, f"Move failed ({item.title}): {e}", tally, progress)
            return False

        try:
            self._filesystem.copy_images(images, new_path)
        except OSError as e:
            self._undo_copy(new_path, library_root)
            self._fail(item, f"Move failed ({item.title}): {e}", tally, progress)
            return False

        try:
            self._repository.update_work_path(item.work_id, item.new_path)
        except SharakuError as e:
            self._undo_copy(new_path, library_root)
            self._fail(item, f"Store update failed ({item.title}): {e}", tally, progress)
            return False

        _ = self._filesystem.remove_files(images)
        if self._filesystem.remove_directory_if_empty(old_path):
            self._filesystem.remove_empty_ancestors(old_path.parent, library_root)
        else:
            self._logger.warning("Old directory kept because it is not empty: %s", old_path)

        self._logger.info(
            "Moved %s",
            item.title,
            extra={
                "library_event": LibraryEvent.RELOCATION_MOVE,
                "display_path": item.new_path,
                "display_base": str(library_root),
            },
        )
        return True

    def _undo_copy(self, new_path: Path, library_root: Path) -> None:
        if self._filesystem.remove_tree(new_path):
            self._filesystem.remove_empty_ancestors(new_path.parent, library_root)
        self._logger.warning(
            "Removed partial copy",
            extra={"library_event": LibraryEvent.RELOCATION_ROLLBACK, "display_path": str(new_path)},
        )

    def _fail(
        self,
        item: RelocationPlanItem,
        message: str,
        tally: _Tally,
        progress: ProgressSink[RelocationEvent] | None,
    ) -> None:
        tally.failed += 1
        self._logger.error(message, extra={"library_event": LibraryEvent.RELOCATION_ERROR})
        emit(progress, RelocationFailed(message=message))


__all__ = ["WorkRelocator"]

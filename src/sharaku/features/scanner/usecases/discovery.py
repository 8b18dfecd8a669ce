"""
Summary: Walk a directory tree and report folders that look like works.
Why: Bulk import starts from this list; it must never abort on one unreadable directory.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from sharaku.config.settings import SCAN_PROGRESS_INTERVAL
from sharaku.platform.logging import logger as default_logger
from sharaku.shared.log_events import LibraryEvent
from sharaku.shared.progress import ProgressSink, emit

from ..domain.folder_name import parse_folder_name
from ..domain.models import DiscoveredFolder, ScanCompleted, ScanEvent, ScanningProgress
from ..domain.natural_sort import natural_path_key
from .image_listing import is_image_file
from .ports import WorkRegistryReader


def discover_image_folders(
    root: Path,
    registry: WorkRegistryReader,
    progress: ProgressSink[ScanEvent] | None = None,
    *,
    progress_interval: int = SCAN_PROGRESS_INTERVAL,
    logger: logging.Logger | None = None,
) -> list[DiscoveredFolder]:
    """Find every directory under ``root`` (inclusive) with images directly inside.

    Directories that cannot be read are logged and skipped. A
    ``ScanningProgress`` event is emitted every ``progress_interval``
    directories and ``ScanCompleted`` once at the end. Results are ordered by
    path in natural order.
    """

    log = logger or default_logger
    interval = max(1, progress_interval)
    log.info("Scanning %s", root, extra={"library_event": LibraryEvent.SCAN_START})

    def on_walk_error(error: OSError) -> None:
        log.warning(
            "Skipping unreadable entry %s: %s",
            error.filename,
            error.strerror or error,
            extra={"library_event": LibraryEvent.SCAN_SKIP_ENTRY},
        )

    found: list[DiscoveredFolder] = []
    scanned = 0
    for dirpath, _dirnames, filenames in os.walk(root, onerror=on_walk_error):
        scanned += 1
        if scanned % interval == 0:
            emit(progress, ScanningProgress(scanned_dirs=scanned))

        directory = Path(dirpath)
        image_count = sum(
            1 for name in filenames if is_image_file(name) and (directory / name).is_file()
        )
        if image_count == 0:
            continue

        found.append(
            DiscoveredFolder(
                path=directory,
                folder_name=directory.name,
                image_count=image_count,
                parsed_metadata=parse_folder_name(directory.name),
                already_registered=registry.path_exists(str(directory)),
            )
        )

    found.sort(key=lambda folder: natural_path_key(folder.path))
    emit(progress, ScanCompleted(found=len(found)))
    log.info(
        "Scanned %d directories, found %d image folders",
        scanned,
        len(found),
        extra={"library_event": LibraryEvent.SCAN_COMPLETE},
    )
    return found


__all__ = ["discover_image_folders"]

"""Structured event identifiers attached to library log records."""

from __future__ import annotations

from enum import StrEnum


class LibraryEvent(StrEnum):
    """Values passed as ``extra={"library_event": ...}`` on log calls."""

    SCAN_START = "scan.start"
    SCAN_COMPLETE = "scan.complete"
    SCAN_SKIP_ENTRY = "scan.skip.entry"
    IMPORT_START = "import.work.start"
    IMPORT_SUCCESS = "import.work.success"
    IMPORT_ROLLBACK = "import.work.rollback"
    IMPORT_ERROR = "import.work.error"
    IMPORT_SOURCE_CLEANUP = "import.source.cleanup"
    RELOCATION_START = "relocation.start"
    RELOCATION_MOVE = "relocation.work.move"
    RELOCATION_SKIP = "relocation.work.skip"
    RELOCATION_ROLLBACK = "relocation.work.rollback"
    RELOCATION_ERROR = "relocation.work.error"
    RELOCATION_COMPLETE = "relocation.complete"


__all__ = ["LibraryEvent"]

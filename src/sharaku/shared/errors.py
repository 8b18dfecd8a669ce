"""Where: sharaku.shared.errors
What: Exception hierarchy shared by every feature and adapter.
Why: Let the CLI and services tell validation, lookup, import and store failures apart.
"""

from __future__ import annotations

from pathlib import Path


class SharakuError(Exception):
    """Base class for all library errors."""


class TemplateValidationError(SharakuError):
    """Raised when a directory template is malformed."""

    def __init__(self, template: str, reason: str) -> None:
        super().__init__(f"Invalid template: {reason}")
        self.template: str = template
        self.reason: str = reason


class NotFoundError(SharakuError):
    """Raised when a work, page or thumbnail does not exist."""


class WorkImportError(SharakuError):
    """Raised when a folder cannot be imported into the library."""

    def __init__(self, source_path: Path, reason: str) -> None:
        super().__init__(f"Import failed for {source_path}: {reason}")
        self.source_path: Path = source_path
        self.reason: str = reason


class RelocationError(SharakuError):
    """Raised when a relocation run cannot be started."""


class StoreError(SharakuError):
    """Raised when the metadata store rejects an operation."""


class DuplicateWorkPathError(StoreError):
    """Raised when a work is inserted at a path that is already registered."""

    def __init__(self, path: str) -> None:
        super().__init__(f"A work is already registered at {path}")
        self.path: str = path


class ThumbnailError(SharakuError):
    """Raised when a thumbnail cannot be decoded or encoded."""


__all__ = [
    "SharakuError",
    "TemplateValidationError",
    "NotFoundError",
    "WorkImportError",
    "RelocationError",
    "StoreError",
    "DuplicateWorkPathError",
    "ThumbnailError",
]

"""Ports for the import feature."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from sharaku.shared.works import AppSettings, WorkRecord


class WorkWriter(Protocol):
    """Register newly imported works."""

    def insert_work(self, record: WorkRecord) -> int:
        """Persist ``record`` and return its id.

        Raises ``DuplicateWorkPathError`` or ``StoreError`` on failure.
        """

        ...


class SettingsReader(Protocol):
    """Provide the library settings snapshot."""

    def get_app_settings(self) -> AppSettings:
        ...


class ThumbnailGenerator(Protocol):
    """Encode a preview image for a work."""

    def generate(self, image_path: Path) -> bytes:
        """Return encoded thumbnail bytes; raise ``ThumbnailError`` on failure."""

        ...


__all__ = ["SettingsReader", "ThumbnailGenerator", "WorkWriter"]

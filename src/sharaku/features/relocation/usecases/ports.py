"""Ports for the relocation feature."""

from __future__ import annotations

from typing import Protocol

from sharaku.shared.works import AppSettings, WorkDetail


class RelocationRepository(Protocol):
    """Persistence operations a relocation run needs."""

    def list_folder_works(self) -> list[WorkDetail]:
        """Return all folder works in a stable order."""

        ...

    def update_work_path(self, work_id: int, new_path: str) -> None:
        """Point a work at its new directory; raise ``StoreError`` on failure."""

        ...

    def get_app_settings(self) -> AppSettings:
        ...

    def set_directory_template(self, template: str) -> None:
        """Persist the template the library now follows."""

        ...


__all__ = ["RelocationRepository"]

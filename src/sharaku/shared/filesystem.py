"""Filesystem port shared by the import and relocation engines."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class FileSystemGateway(Protocol):
    """Abstract filesystem operations needed by the use cases."""

    def exists(self, path: Path) -> bool:
        """Return True if the path exists."""

        ...

    def is_dir(self, path: Path) -> bool:
        """Return True when the path is a directory."""

        ...

    def list_images(self, directory: Path) -> list[Path]:
        """Return the images directly inside ``directory`` in page order."""

        ...

    def create_directory_exclusive(self, path: Path) -> None:
        """Create ``path`` and its parents; raise ``FileExistsError`` if the leaf exists."""

        ...

    def copy_images(self, images: list[Path], destination: Path) -> None:
        """Copy ``images`` into ``destination`` keeping their names."""

        ...

    def remove_tree(self, path: Path) -> bool:
        """Remove ``path`` recursively; return True when nothing is left."""

        ...

    def remove_files(self, files: list[Path]) -> int:
        """Delete ``files`` best-effort and return how many were removed."""

        ...

    def remove_directory_if_empty(self, path: Path) -> bool:
        """Remove ``path`` if it is an empty directory."""

        ...

    def remove_empty_ancestors(self, start: Path, stop_at: Path) -> None:
        """Prune empty directories from ``start`` up to, not including, ``stop_at``."""

        ...


__all__ = ["FileSystemGateway"]

"""Filesystem adapter for the import and relocation use cases."""

from __future__ import annotations

from pathlib import Path

from sharaku.features.scanner import list_images_in_folder
from sharaku.platform.filesystem import (
    copy_images,
    create_directory_exclusive,
    remove_directory_if_empty,
    remove_empty_ancestors,
    remove_files,
    remove_tree,
)
from sharaku.shared.filesystem import FileSystemGateway


class LocalFileSystemGateway(FileSystemGateway):
    """Thin wrapper around the local filesystem."""

    def exists(self, path: Path) -> bool:
        return path.exists()

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def list_images(self, directory: Path) -> list[Path]:
        return list_images_in_folder(directory)

    def create_directory_exclusive(self, path: Path) -> None:
        create_directory_exclusive(path)

    def copy_images(self, images: list[Path], destination: Path) -> None:
        copy_images(images, destination)

    def remove_tree(self, path: Path) -> bool:
        return remove_tree(path)

    def remove_files(self, files: list[Path]) -> int:
        return remove_files(files)

    def remove_directory_if_empty(self, path: Path) -> bool:
        return remove_directory_if_empty(path)

    def remove_empty_ancestors(self, start: Path, stop_at: Path) -> None:
        remove_empty_ancestors(start, stop_at)


__all__ = ["LocalFileSystemGateway"]

"""
Summary: Local filesystem helpers shared by the import and relocation engines.
Why: Keep directory creation and cleanup rules in one place.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from sharaku.platform.logging import logger


def ensure_directory(path: Path) -> Path:
    """Create ``path`` (and parents) if missing and return it."""

    path.mkdir(parents=True, exist_ok=True)
    return path


def ensure_parent_directory(path: Path) -> Path:
    """Create the parent directory of ``path`` and return the parent."""

    return ensure_directory(path.parent)


def create_directory_exclusive(path: Path) -> None:
    """Create ``path`` with its parents, failing if the leaf already exists.

    Raises:
        FileExistsError: Another writer created ``path`` first.
    """

    _ = ensure_parent_directory(path)
    path.mkdir(exist_ok=False)


def copy_images(images: list[Path], destination: Path) -> None:
    """Copy every image into ``destination`` keeping file names."""

    for image in images:
        _ = shutil.copy2(image, destination / image.name)


def remove_files(files: list[Path]) -> int:
    """Best-effort deletion of ``files``; returns how many were removed."""

    removed = 0
    for file in files:
        try:
            file.unlink()
            removed += 1
        except OSError as e:
            logger.warning("Failed to remove %s: %s", file, e)
    return removed


def remove_tree(path: Path) -> bool:
    """Best-effort recursive removal used to undo a partial write.

    Returns:
        True when nothing is left at ``path``.
    """

    if not path.exists():
        return True
    try:
        shutil.rmtree(path)
        return True
    except OSError as e:
        logger.warning("Failed to remove %s during rollback: %s", path, e)
        return False


def remove_directory_if_empty(path: Path) -> bool:
    """Remove ``path`` when it is an empty directory."""

    try:
        path.rmdir()
        return True
    except OSError:
        return False


def remove_empty_ancestors(start: Path, stop_at: Path) -> None:
    """Remove empty directories from ``start`` upward.

    The walk stops at the first directory that cannot be removed, at
    ``stop_at`` itself, or when it leaves ``stop_at``; ``stop_at`` is never
    removed. Paths are compared lexically.
    """

    current = start
    while current != stop_at and current.is_relative_to(stop_at):
        if current.exists() and not remove_directory_if_empty(current):
            return
        current = current.parent


__all__ = [
    "copy_images",
    "create_directory_exclusive",
    "ensure_directory",
    "ensure_parent_directory",
    "remove_directory_if_empty",
    "remove_empty_ancestors",
    "remove_files",
    "remove_tree",
]

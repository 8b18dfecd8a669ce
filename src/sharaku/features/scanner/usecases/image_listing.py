"""Recognise image files and list the pages of a folder work."""

from __future__ import annotations

from pathlib import Path
from typing import Final

from ..domain.natural_sort import natural_sort_key

IMAGE_EXTENSIONS: Final[frozenset[str]] = frozenset({"jpg", "jpeg", "png", "gif", "webp", "bmp"})


def is_image_file(path: Path | str) -> bool:
    """Return True when the extension is a known image type (case-insensitive)."""

    suffix = Path(path).suffix
    return bool(suffix) and suffix[1:].lower() in IMAGE_EXTENSIONS


def list_images_in_folder(directory: Path) -> list[Path]:
    """Return the images directly inside ``directory`` in natural name order.

    Raises:
        OSError: ``directory`` cannot be listed.
    """

    images = [entry for entry in directory.iterdir() if entry.is_file() and is_image_file(entry)]
    images.sort(key=lambda image: natural_sort_key(image.name))
    return images


__all__ = ["IMAGE_EXTENSIONS", "is_image_file", "list_images_in_folder"]

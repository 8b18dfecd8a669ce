"""Resolve a work page to its bytes and content type."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final

from sharaku.features.scanner import list_images_in_folder
from sharaku.shared.errors import NotFoundError
from sharaku.shared.works import WorkType

from .ports import WorkReader

DEFAULT_CONTENT_TYPE: Final[str] = "application/octet-stream"
_CONTENT_TYPES: Final[dict[str, str]] = {
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/png",
    "gif": "image/gif",
    "webp": "image/webp",
    "bmp": "image/bmp",
}


def content_type_from_path(path: Path | str) -> str:
    """MIME type for an image file, judged by its extension."""

    suffix = Path(path).suffix
    return _CONTENT_TYPES.get(suffix[1:].lower(), DEFAULT_CONTENT_TYPE) if suffix else DEFAULT_CONTENT_TYPE


@dataclass(slots=True, frozen=True)
class PageContent:
    data: bytes
    content_type: str


class PageLoader:
    """Serve individual pages of registered works."""

    _works: WorkReader

    def __init__(self, works: WorkReader) -> None:
        self._works = works

    def page_path(self, work_id: int, page_index: int) -> Path:
        """Locate the image file backing ``page_index`` of a work.

        Folder works index their natural-sorted image list; image works only
        have page 0.

        Raises:
            NotFoundError: The work, its directory or the page does not exist.
        """

        work = self._works.get_work(work_id)
        if work is None:
            raise NotFoundError(f"Work {work_id} not found")
        if page_index < 0:
            raise NotFoundError(f"Page {page_index} not found for work {work_id}")

        if work.work_type is WorkType.IMAGE:
            if page_index != 0:
                raise NotFoundError(f"Page {page_index} not found for work {work_id}")
            return Path(work.path)

        try:
            images = list_images_in_folder(Path(work.path))
        except FileNotFoundError as e:
            raise NotFoundError(f"Directory for work {work_id} is missing") from e
        if page_index >= len(images):
            raise NotFoundError(f"Page {page_index} not found for work {work_id}")
        return images[page_index]

    def load_page(self, work_id: int, page_index: int) -> PageContent:
        """Read one page.

        Raises:
            NotFoundError: The page cannot be located or read.
            OSError: The work directory exists but cannot be listed.
        """

        path = self.page_path(work_id, page_index)
        try:
            data = path.read_bytes()
        except OSError as e:
            raise NotFoundError(f"Cannot read {path}: {e}") from e
        return PageContent(data=data, content_type=content_type_from_path(path))


__all__ = ["DEFAULT_CONTENT_TYPE", "PageContent", "PageLoader", "content_type_from_path"]

"""Opaque page locators of the form ``sharaku://view/<work_id>/<page_index>``."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

VIEW_SCHEME: Final[str] = "sharaku"
_VIEW_MARKER: Final[str] = "view/"
_WORK_ID: Final[re.Pattern[str]] = re.compile(r"-?\d+")
_PAGE_INDEX: Final[re.Pattern[str]] = re.compile(r"\d+")


@dataclass(slots=True, frozen=True)
class PageLocator:
    work_id: int
    page_index: int


def format_view_uri(work_id: int, page_index: int) -> str:
    """Build the locator a viewer uses to request one page."""

    return f"{VIEW_SCHEME}://{_VIEW_MARKER}{work_id}/{page_index}"


def parse_view_uri(uri: str) -> PageLocator | None:
    """Extract ``(work_id, page_index)`` from a locator.

    Anything before ``view/`` is ignored, as are a query string or fragment.
    Returns None for malformed input.
    """

    marker = uri.find(_VIEW_MARKER)
    if marker < 0:
        return None
    rest = uri[marker + len(_VIEW_MARKER) :].split("?", 1)[0].split("#", 1)[0]
    work_part, separator, page_part = rest.partition("/")
    if not separator:
        return None
    if not _WORK_ID.fullmatch(work_part) or not _PAGE_INDEX.fullmatch(page_part):
        return None
    return PageLocator(work_id=int(work_part), page_index=int(page_part))


__all__ = ["PageLocator", "VIEW_SCHEME", "format_view_uri", "parse_view_uri"]

"""Closed set of template placeholders and how each one reads work metadata."""

from __future__ import annotations

from enum import StrEnum
from typing import Final, assert_never

from sharaku.shared.work_metadata import WorkMetadata

UNKNOWN_VALUE: Final[str] = "Unknown"


class Placeholder(StrEnum):
    """Names accepted inside ``{...}`` in a directory template."""

    TITLE = "title"
    ARTIST = "artist"
    YEAR = "year"
    GENRE = "genre"
    CIRCLE = "circle"
    ORIGIN = "origin"
    TYPE = "type"

    @classmethod
    def parse(cls, name: str) -> "Placeholder | None":
        """Return the placeholder called ``name`` or None when it is not known."""

        try:
            return cls(name)
        except ValueError:
            return None


def resolve_placeholder(placeholder: Placeholder, metadata: WorkMetadata) -> str:
    """Return the text substituted for ``placeholder``.

    The title is used verbatim; every other field falls back to ``Unknown``.
    """

    value: str | int | None
    match placeholder:
        case Placeholder.TITLE:
            return metadata.title
        case Placeholder.ARTIST:
            value = metadata.artist
        case Placeholder.YEAR:
            value = metadata.year
        case Placeholder.GENRE:
            value = metadata.genre
        case Placeholder.CIRCLE:
            value = metadata.circle
        case Placeholder.ORIGIN:
            value = metadata.origin
        case Placeholder.TYPE:
            value = metadata.work_type
        case _:
            assert_never(placeholder)
    return UNKNOWN_VALUE if value is None else str(value)


__all__ = ["Placeholder", "UNKNOWN_VALUE", "resolve_placeholder"]

"""Shared work record value objects (domain <-> adapters).

Where: shared/.
What: Dataclasses describing persisted works and library settings.
Why: Keep the store contract in one place so ports and DAOs stay in sync.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from .work_metadata import WorkMetadata


class WorkType(StrEnum):
    """Kinds of works stored in the library."""

    IMAGE = "image"
    FOLDER = "folder"


DEFAULT_TYPE_LABELS: dict[WorkType, str] = {
    WorkType.IMAGE: "Image",
    WorkType.FOLDER: "Folder",
}


@dataclass(frozen=True, slots=True)
class WorkRecord:
    """Payload inserted into the store when a work is registered."""

    title: str
    path: str
    work_type: WorkType
    page_count: int
    thumbnail: bytes
    artist: str | None = None
    year: int | None = None
    genre: str | None = None
    circle: str | None = None
    origin: str | None = None


@dataclass(frozen=True, slots=True)
class WorkDetail:
    """A registered work with all of its metadata."""

    id: int
    title: str
    path: str
    work_type: WorkType
    page_count: int
    created_at: str
    artist: str | None = None
    year: int | None = None
    genre: str | None = None
    circle: str | None = None
    origin: str | None = None

    def to_metadata(self, type_label: str | None = None) -> WorkMetadata:
        """Project the stored fields into template metadata."""

        return WorkMetadata(
            title=self.title,
            artist=self.artist,
            year=self.year,
            genre=self.genre,
            circle=self.circle,
            origin=self.origin,
            work_type=type_label,
        )


@dataclass(frozen=True, slots=True)
class WorkSummary:
    """Listing row for a registered work."""

    id: int
    title: str
    work_type: WorkType
    page_count: int
    created_at: str


@dataclass(frozen=True, slots=True)
class AppSettings:
    """Snapshot of the library settings stored alongside the works."""

    library_root: str | None
    directory_template: str | None
    type_label_image: str
    type_label_folder: str

    def type_label(self, work_type: WorkType) -> str:
        """Return the display label configured for ``work_type``."""

        if work_type is WorkType.IMAGE:
            return self.type_label_image
        return self.type_label_folder


__all__ = [
    "AppSettings",
    "DEFAULT_TYPE_LABELS",
    "WorkDetail",
    "WorkRecord",
    "WorkSummary",
    "WorkType",
]

"""Data structures describing folder imports and their progress events."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Final

from sharaku.shared.work_metadata import WorkMetadata


class ImportMode(StrEnum):
    """How source files are treated once the library copy is registered."""

    COPY = "copy"
    MOVE = "move"

    @staticmethod
    def from_user_input(value: str) -> "ImportMode":
        """Translate raw CLI input into the matching mode."""

        normalized = value.strip().lower()
        for mode in ImportMode:
            if mode.value == normalized:
                return mode
        valid: Final[str] = ", ".join(m.value for m in ImportMode)
        msg = f"Unsupported import mode '{value}'. Valid options: {valid}"
        raise ValueError(msg)


@dataclass(slots=True, frozen=True)
class ImportRequest:
    """A folder to import with the metadata the user confirmed."""

    source_path: Path
    title: str
    artist: str | None = None
    year: int | None = None
    genre: str | None = None
    circle: str | None = None
    origin: str | None = None
    mode: ImportMode = ImportMode.COPY

    def to_metadata(self, type_label: str | None) -> WorkMetadata:
        """Metadata used to render the destination directory."""

        return WorkMetadata(
            title=self.title,
            artist=self.artist,
            year=self.year,
            genre=self.genre,
            circle=self.circle,
            origin=self.origin,
            work_type=type_label,
        )


@dataclass(slots=True, frozen=True)
class ImportResult:
    """Where an imported work landed and how many pages it has."""

    destination_path: Path
    page_count: int


@dataclass(slots=True, frozen=True)
class BulkImportSummary:
    """Outcome counts for a bulk import run."""

    succeeded: int
    failed: int


@dataclass(slots=True, frozen=True)
class BulkImportStarted:
    total: int


@dataclass(slots=True, frozen=True)
class BulkImportImporting:
    current: int
    total: int
    title: str


@dataclass(slots=True, frozen=True)
class BulkImportError:
    title: str
    message: str


@dataclass(slots=True, frozen=True)
class BulkImportCompleted:
    succeeded: int
    failed: int


BulkImportEvent = BulkImportStarted | BulkImportImporting | BulkImportError | BulkImportCompleted


__all__ = [
    "BulkImportCompleted",
    "BulkImportError",
    "BulkImportEvent",
    "BulkImportImporting",
    "BulkImportStarted",
    "BulkImportSummary",
    "ImportMode",
    "ImportRequest",
    "ImportResult",
]

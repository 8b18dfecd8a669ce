# Where: sharaku.shared.work_metadata
# What: Canonical WorkMetadata dataclass used when rendering directory templates.
# Why: Importer, relocator and previews must render from the same value object.

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class WorkMetadata:
    """Descriptive metadata for a single work."""

    title: str
    artist: str | None = None
    year: int | None = None
    genre: str | None = None
    circle: str | None = None
    origin: str | None = None
    work_type: str | None = None


__all__ = ["WorkMetadata"]

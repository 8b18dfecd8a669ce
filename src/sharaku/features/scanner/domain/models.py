"""
Summary: Scanner results and progress events.
Why: Keep the discovery use case free of presentation concerns.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .folder_name import ParsedMetadata


@dataclass(frozen=True, slots=True)
class DiscoveredFolder:
    """A directory holding at least one image directly inside it."""

    path: Path
    folder_name: str
    image_count: int
    parsed_metadata: ParsedMetadata
    already_registered: bool


@dataclass(frozen=True, slots=True)
class ScanningProgress:
    """Emitted periodically while directories are being walked."""

    scanned_dirs: int


@dataclass(frozen=True, slots=True)
class ScanCompleted:
    """Emitted once when the walk finishes."""

    found: int


ScanEvent = ScanningProgress | ScanCompleted


__all__ = ["DiscoveredFolder", "ScanCompleted", "ScanEvent", "ScanningProgress"]

"""Progress events and summary for relocation runs."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class RelocationStarted:
    total: int


@dataclass(slots=True, frozen=True)
class RelocationMoving:
    current: int
    total: int
    title: str


@dataclass(slots=True, frozen=True)
class RelocationFailed:
    """A single work could not be relocated; the run continues."""

    message: str


@dataclass(slots=True, frozen=True)
class RelocationCompleted:
    relocated: int
    skipped: int
    failed: int


@dataclass(slots=True, frozen=True)
class RelocationSummary:
    """Counts reported once a relocation run has finished."""

    relocated: int
    skipped: int
    failed: int


RelocationEvent = RelocationStarted | RelocationMoving | RelocationFailed | RelocationCompleted


__all__ = [
    "RelocationCompleted",
    "RelocationEvent",
    "RelocationFailed",
    "RelocationMoving",
    "RelocationStarted",
    "RelocationSummary",
]

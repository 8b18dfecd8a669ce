# Path: `src/sharaku/features/relocation/__init__.py`
# Summary: Export the relocation engine, its events and the plan type.
# Why: Application services and the CLI share one import surface.

from sharaku.features.path import RelocationPlanItem

from .domain.models import (
    RelocationCompleted,
    RelocationEvent,
    RelocationFailed,
    RelocationMoving,
    RelocationStarted,
    RelocationSummary,
)
from .usecases.ports import RelocationRepository
from .usecases.relocate_works import WorkRelocator

__all__ = [
    "RelocationCompleted",
    "RelocationEvent",
    "RelocationFailed",
    "RelocationMoving",
    "RelocationPlanItem",
    "RelocationRepository",
    "RelocationStarted",
    "RelocationSummary",
    "WorkRelocator",
]

"""Relocation plan value objects."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RelocationPlanItem:
    """One work that must move for the directory layout to match a template.

    Attributes:
        work_id: Store id of the work.
        title: Work title, used in progress messages.
        old_path: Directory the work occupies when this step runs.
        new_path: Directory the step moves it to; never equal to ``old_path``.
            A staging step is followed by a second item for the same work.
    """

    work_id: int
    title: str
    old_path: str
    new_path: str


__all__ = ["RelocationPlanItem"]

"""Ports for the viewer feature."""

from __future__ import annotations

from typing import Protocol

from sharaku.shared.works import WorkDetail


class WorkReader(Protocol):
    """Look up a registered work by id."""

    def get_work(self, work_id: int) -> WorkDetail | None:
        ...


__all__ = ["WorkReader"]

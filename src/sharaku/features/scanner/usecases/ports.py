"""Ports consumed by the scanner use cases."""

from __future__ import annotations

from typing import Protocol


class WorkRegistryReader(Protocol):
    """Answer whether a directory is already registered as a work."""

    def path_exists(self, path: str) -> bool:
        ...


__all__ = ["WorkRegistryReader"]

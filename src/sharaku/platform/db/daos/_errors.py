"""Shared failure handling for DAOs: log, roll back, wrap in ``StoreError``."""

from __future__ import annotations

import sqlite3

from sharaku.platform.logging import logger
from sharaku.shared.errors import StoreError


def store_failure(conn: sqlite3.Connection, action: str, exc: sqlite3.Error) -> StoreError:
    """Log ``exc``, roll back the open transaction and build the error to raise."""

    logger.error("Failed to %s: %s", action, exc)
    try:
        conn.rollback()
    except sqlite3.Error as rollback_exc:
        logger.debug("Rollback after failed %s also failed: %s", action, rollback_exc)
    return StoreError(f"Failed to {action}: {exc}")


__all__ = ["store_failure"]

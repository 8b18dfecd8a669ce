"""
Summary: Fire-and-forget progress sink shared by long-running library operations.
Why: A failing observer must never abort the operation it watches.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from sharaku.platform.logging import logger

EventT = TypeVar("EventT")

ProgressSink = Callable[[EventT], None]


def emit(sink: Callable[[EventT], None] | None, event: EventT) -> None:
    """Deliver ``event`` to ``sink``; delivery failures are logged and ignored."""

    if sink is None:
        return
    try:
        sink(event)
    except Exception as exc:  # noqa: BLE001 - progress delivery is best effort
        logger.debug("Progress sink rejected %s: %s", type(event).__name__, exc)


__all__ = ["ProgressSink", "emit"]

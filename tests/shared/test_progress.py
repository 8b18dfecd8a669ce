"""Tests for progress delivery."""

from __future__ import annotations

from sharaku.shared.progress import emit


def test_emit_delivers_event() -> None:
    received: list[int] = []

    emit(received.append, 3)

    assert received == [3]


def test_emit_without_sink_is_noop() -> None:
    emit(None, "ignored")


def test_emit_swallows_sink_errors() -> None:
    def broken(_event: str) -> None:
        raise ValueError("closed")

    emit(broken, "event")

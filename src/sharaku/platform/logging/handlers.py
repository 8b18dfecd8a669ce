"""Rich console handler that styles library events and compacts paths.

Where: platform/logging/handlers.py
What: ``LibraryRichHandler`` renders event icons, level tags and trailing paths.
Why: Keep console output readable during long scans and relocations.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text

from sharaku.shared.log_events import LibraryEvent


class LibraryRichHandler(RichHandler):
    """Rich handler that decorates records carrying a ``library_event`` extra."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        LibraryEvent.SCAN_START: ("🔍", "cyan"),
        LibraryEvent.SCAN_COMPLETE: ("✅", "green"),
        LibraryEvent.IMPORT_START: ("📥", "blue"),
        LibraryEvent.IMPORT_SUCCESS: ("🎉", "green"),
        LibraryEvent.IMPORT_ROLLBACK: ("↩️", "yellow"),
        LibraryEvent.IMPORT_ERROR: ("⛔", "red"),
        LibraryEvent.RELOCATION_START: ("🚚", "cyan"),
        LibraryEvent.RELOCATION_MOVE: ("📦", "magenta"),
        LibraryEvent.RELOCATION_SKIP: ("↪️", "yellow"),
        LibraryEvent.RELOCATION_ROLLBACK: ("↩️", "yellow"),
        LibraryEvent.RELOCATION_ERROR: ("❌", "red"),
        LibraryEvent.RELOCATION_COMPLETE: ("✅", "green"),
    }
    _LEVEL_STYLES: ClassVar[dict[int, str]] = {
        logging.WARNING: "yellow",
        logging.ERROR: "red",
        logging.CRITICAL: "bold red",
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False  # level tags are rendered in render_message
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        text = Text()

        level_style = self._LEVEL_STYLES.get(record.levelno)
        if level_style is not None:
            _ = text.append(f"{record.levelname}: ", style=level_style)

        event = getattr(record, "library_event", None)
        icon_style = self._EVENT_STYLES.get(str(event)) if event is not None else None
        if icon_style is not None:
            icon, color = icon_style
            _ = text.append(f"{icon} ")
            _ = text.append(message, style=color)
        else:
            _ = text.append(message)

        display_path = getattr(record, "display_path", None)
        if display_path is not None:
            base = getattr(record, "display_base", None)
            _ = text.append("  ")
            _ = text.append_text(self._format_path(str(display_path), str(base) if base else None))
        return text

    def _format_path(self, path: str, base: str | None = None) -> Text:
        """Format a path relative to ``base`` with an ellipsis for deep paths."""

        pure_path = self._to_pure_path(path)
        base_path = self._to_pure_path(base) if base else None

        display_path: PurePath = pure_path
        if base_path is not None and pure_path.is_relative_to(base_path):
            relative_path = pure_path.relative_to(base_path)
            if str(relative_path) not in {"", "."}:
                display_path = relative_path

        separator = "\\" if isinstance(display_path, PureWindowsPath) else "/"
        anchor = display_path.anchor
        body_parts = [part for part in display_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]

        display_string = anchor.rstrip("\\/") + separator if anchor else ""
        if truncated:
            display_string += "…" + separator
        display_string += separator.join(body_parts)

        text = Text()
        for char in display_string or ".":
            if char in {separator, "…"}:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)


class LibraryFileFormatter(logging.Formatter):
    """Plain-text formatter for log files.

    The event id is written in brackets after the level and the full
    ``display_path`` (never shortened) is appended, so log files can be
    grepped by event or by work directory.
    """

    _FORMAT: ClassVar[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    def __init__(self) -> None:
        super().__init__(self._FORMAT)

    @override
    def formatMessage(self, record: logging.LogRecord) -> str:
        line = super().formatMessage(record)
        event = getattr(record, "library_event", None)
        if event is not None:
            head, sep, tail = line.partition(f" - {record.levelname} - ")
            if sep:
                line = f"{head}{sep.rstrip()} [{event}] {tail}"
        display_path = getattr(record, "display_path", None)
        if display_path is not None:
            line = f"{line} ({display_path})"
        return line


__all__ = ["LibraryFileFormatter", "LibraryRichHandler"]

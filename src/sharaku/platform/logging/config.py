"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Attach a Rich console handler and a rotating file handler to ``sharaku``.
Why: Every entry point reconfigures the same logger instead of building its own.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final

from rich.console import Console

from sharaku.config.paths import default_log_file

from .handlers import LibraryFileFormatter, LibraryRichHandler


LOGGER_NAME: Final[str] = "sharaku"
DEFAULT_LOG_FILE: Final[Path] = default_log_file()
_ROTATE_AT_BYTES: Final[int] = 10 * 1024 * 1024
_ROTATED_FILES_KEPT: Final[int] = 5


def _drop_handlers(target: logging.Logger) -> None:
    while target.handlers:
        handler = target.handlers[0]
        target.removeHandler(handler)
        handler.close()


def _console_handler(level: int) -> logging.Handler:
    handler = LibraryRichHandler(console=Console(stderr=True, force_terminal=True, soft_wrap=True))
    handler.setLevel(level)
    return handler


def _file_handler(log_file: Path, level: int) -> logging.Handler:
    target = log_file.expanduser().resolve()
    target.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        target,
        maxBytes=_ROTATE_AT_BYTES,
        backupCount=_ROTATED_FILES_KEPT,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(LibraryFileFormatter())
    return handler


def setup_logger(
    log_file: Path | str | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """(Re)configure the ``sharaku`` logger.

    Existing handlers are closed first, so the CLI can call this again after
    parsing ``--verbose``/``--quiet`` or a configured log file.
    """

    app_logger = logging.getLogger(LOGGER_NAME)
    app_logger.setLevel(logging.DEBUG)
    _drop_handlers(app_logger)

    app_logger.addHandler(_console_handler(console_level))
    if log_file is not None:
        app_logger.addHandler(_file_handler(Path(log_file), file_level))
    return app_logger


logger: Final[logging.Logger] = setup_logger(log_file=DEFAULT_LOG_FILE)


__all__ = ["DEFAULT_LOG_FILE", "LOGGER_NAME", "setup_logger", "logger"]

"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the configured logger, its setup helper and formatting classes.
Why: Give every layer one import path for logging.
"""

from __future__ import annotations

from .config import DEFAULT_LOG_FILE, logger, setup_logger
from .handlers import LibraryFileFormatter, LibraryRichHandler

__all__ = [
    "DEFAULT_LOG_FILE",
    "LibraryFileFormatter",
    "LibraryRichHandler",
    "logger",
    "setup_logger",
]

"""Where: src/sharaku/config/settings.py
What: Runtime constants derived from the loaded configuration file.
Why: Feature layers read plain values and never touch the config file.
Assumptions: - Out-of-range values fall back to the shipped defaults.
"""

from __future__ import annotations

from pathlib import Path

from sharaku.config.config import (
    SCAN_PROGRESS_INTERVAL_DEFAULT,
    THUMBNAIL_MAX_HEIGHT_DEFAULT,
    THUMBNAIL_MAX_WIDTH_DEFAULT,
    THUMBNAIL_QUALITY_DEFAULT,
    config as app_config,
)
from sharaku.config.paths import default_db_path


def _bounded(name: str, default: int, upper: int | None = None) -> int:
    value = getattr(app_config, name, default)
    if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
        return default
    if upper is not None and value > upper:
        return default
    return value


# Metadata store ---------------------------------------------------------------

DB_PATH: Path = app_config.db_path or default_db_path()


# Scanner ------------------------------------------------------------------------

SCAN_PROGRESS_INTERVAL: int = _bounded("scan_progress_interval", SCAN_PROGRESS_INTERVAL_DEFAULT)


# Thumbnails ---------------------------------------------------------------------

THUMBNAIL_MAX_WIDTH: int = _bounded("thumbnail_max_width", THUMBNAIL_MAX_WIDTH_DEFAULT)
THUMBNAIL_MAX_HEIGHT: int = _bounded("thumbnail_max_height", THUMBNAIL_MAX_HEIGHT_DEFAULT)
THUMBNAIL_QUALITY: int = _bounded("thumbnail_quality", THUMBNAIL_QUALITY_DEFAULT, upper=100)


# Import -------------------------------------------------------------------------

# Destination re-resolutions after losing a directory creation race.
UNIQUE_DESTINATION_ATTEMPTS: int = 8


__all__ = [
    "DB_PATH",
    "SCAN_PROGRESS_INTERVAL",
    "THUMBNAIL_MAX_WIDTH",
    "THUMBNAIL_MAX_HEIGHT",
    "THUMBNAIL_QUALITY",
    "UNIQUE_DESTINATION_ATTEMPTS",
]

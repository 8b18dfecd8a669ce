"""Where the configuration file, metadata store and logs live.

Everything sits under the repository root so a checkout is self-contained:

- ``<repo_root>/config/config.toml``
- ``<repo_root>/.data/sharaku.db`` (the data directory can be moved with
  ``SHARAKU_DATA_DIR``)
- ``<repo_root>/logs/sharaku.log``

The library root itself is not a file location of the application; it is a
user setting stored in the metadata store.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Final

DATA_DIR_ENV: Final[str] = "SHARAKU_DATA_DIR"

CONFIG_DIR_NAME: Final[str] = "config"
CONFIG_FILE_NAME: Final[str] = "config.toml"
DATA_DIR_NAME: Final[str] = ".data"
DB_FILE_NAME: Final[str] = "sharaku.db"
LOG_DIR_NAME: Final[str] = "logs"
LOG_FILE_NAME: Final[str] = "sharaku.log"

_ROOT_MARKERS: Final[tuple[str, ...]] = ("pyproject.toml", ".git")


def _detect_repo_root(start: Path | None = None) -> Path:
    """Return the nearest ancestor of ``start`` holding a root marker.

    Falls back to the current working directory when no marker is found, as
    happens for a wheel installed into site-packages.
    """

    here = (start or Path(__file__).resolve()).parent
    for candidate in (here, *here.parents):
        if any((candidate / marker).exists() for marker in _ROOT_MARKERS):
            return candidate
    return Path.cwd()


def _repo_path(*parts: str) -> Path:
    return _detect_repo_root().joinpath(*parts).resolve()


def env_path_or_default(
    env_var: str,
    default: Path,
    env: Mapping[str, str] | None = None,
) -> Path:
    """Use the directory named by ``env_var`` when it is set and not blank."""

    raw = (env if env is not None else os.environ).get(env_var, "").strip()
    chosen = Path(raw) if raw else default
    return chosen.expanduser().resolve()


def default_config_path() -> Path:
    return _repo_path(CONFIG_DIR_NAME, CONFIG_FILE_NAME)


def default_data_dir() -> Path:
    """Directory holding the SQLite metadata store."""

    return env_path_or_default(DATA_DIR_ENV, _repo_path(DATA_DIR_NAME))


def default_db_path() -> Path:
    return default_data_dir() / DB_FILE_NAME


def default_log_dir() -> Path:
    return _repo_path(LOG_DIR_NAME)


def default_log_file() -> Path:
    return default_log_dir() / LOG_FILE_NAME


__all__ = [
    "DATA_DIR_ENV",
    "default_config_path",
    "default_data_dir",
    "default_db_path",
    "default_log_dir",
    "default_log_file",
    "env_path_or_default",
]

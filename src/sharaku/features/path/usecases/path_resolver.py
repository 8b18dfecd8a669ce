# Path: `src/sharaku/features/path/usecases/path_resolver.py`
# Summary: Turn a template and metadata into an absolute directory under the library root.
# Why: Every destination written by import or relocation goes through these checks.

"""Work path resolution."""

from __future__ import annotations

import threading
import time
from pathlib import Path
from typing import Final

from sharaku.features.template import render_template
from sharaku.shared.work_metadata import WorkMetadata

INVALID_PATH_NAME: Final[str] = "_invalid_path"
SUFFIX_SEPARATOR: Final[str] = "_"


def normalize_lexically(path: Path) -> Path:
    """Collapse ``.`` and ``..`` components without touching the filesystem."""

    anchor = path.anchor
    parts: list[str] = []
    for part in path.parts:
        if part == anchor and anchor:
            continue
        if part == ".":
            continue
        if part == "..":
            if parts:
                _ = parts.pop()
            continue
        parts.append(part)
    return Path(anchor, *parts) if anchor else Path(*parts)


def invalid_path(library_root: Path) -> Path:
    """Sentinel returned when a rendered template would leave the library root."""

    return library_root / INVALID_PATH_NAME


def is_invalid_path(path: Path, library_root: Path) -> bool:
    """Return True when ``path`` is the escape sentinel for ``library_root``."""

    return path == invalid_path(library_root)


def resolve_work_path(library_root: Path, template: str, metadata: WorkMetadata) -> Path:
    """Render ``template`` for ``metadata`` and join it to ``library_root``.

    The joined path is normalized lexically; if it is not strictly inside
    ``library_root`` the sentinel from :func:`invalid_path` is returned.
    """

    root = normalize_lexically(library_root)
    candidate = normalize_lexically(root / render_template(template, metadata))
    if candidate == root or not candidate.is_relative_to(root):
        return invalid_path(library_root)
    return candidate


def path_taken(path: Path) -> bool:
    """Return True if ``path`` exists, matching the leaf name case-insensitively."""

    if path.exists():
        return True
    parent = path.parent
    if not parent.is_dir():
        return False
    wanted = path.name.casefold()
    try:
        return any(entry.name.casefold() == wanted for entry in parent.iterdir())
    except OSError:
        return False


def _quick_suffix() -> str:
    """Four hex digits mixed from the clock and the calling thread."""

    mixed = hash((time.time_ns(), threading.get_ident()))
    return f"{mixed & 0xFFFF:04x}"


def with_suffix(path: Path, suffix: str) -> Path:
    """Append ``_<suffix>`` to the final segment of ``path``."""

    return path.with_name(f"{path.name}{SUFFIX_SEPARATOR}{suffix}")


def resolve_unique_work_path(library_root: Path, template: str, metadata: WorkMetadata) -> Path:
    """Resolve like :func:`resolve_work_path`, adding a random suffix on collision.

    This is a best-effort check; the caller still has to create the directory
    exclusively and retry if it lost a race.
    """

    base = resolve_work_path(library_root, template, metadata)
    if is_invalid_path(base, library_root) or not path_taken(base):
        return base
    return with_suffix(base, _quick_suffix())


__all__ = [
    "INVALID_PATH_NAME",
    "invalid_path",
    "is_invalid_path",
    "normalize_lexically",
    "path_taken",
    "resolve_unique_work_path",
    "resolve_work_path",
    "with_suffix",
]

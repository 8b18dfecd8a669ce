"""Natural ordering for page file names (``page2`` before ``page10``)."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Final

_DIGIT_RUNS: Final[re.Pattern[str]] = re.compile(r"(\d+)")

NaturalKey = tuple[tuple[int | str, ...], str]


def natural_sort_key(name: str) -> NaturalKey:
    """Return a sort key where digit runs compare by numeric value.

    ``re.split`` with a capturing group alternates text and digit chunks, so
    chunks at the same index always share a type and compare cleanly. Text
    compares case-insensitively; the raw name breaks ties.
    """

    chunks = _DIGIT_RUNS.split(name)
    parts = tuple(int(chunk) if index % 2 else chunk.casefold() for index, chunk in enumerate(chunks))
    return parts, name


def natural_path_key(path: Path) -> tuple[NaturalKey, ...]:
    """Sort key comparing each path component naturally."""

    return tuple(natural_sort_key(part) for part in path.parts)


__all__ = ["NaturalKey", "natural_path_key", "natural_sort_key"]

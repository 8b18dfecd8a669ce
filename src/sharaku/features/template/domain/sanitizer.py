"""Path segment sanitization for rendered templates."""

from typing import Final

FORBIDDEN_CHARS: Final[frozenset[str]] = frozenset('/\\:*?"<>|')
EMPTY_SEGMENT_REPLACEMENT: Final[str] = "_"


def sanitize_segment(segment: str) -> str:
    """Strip forbidden characters and surrounding whitespace from one segment.

    Segments that end up empty, ``.`` or ``..`` become ``_`` so a rendered
    template never yields an empty or navigational path component.
    """

    cleaned = "".join(char for char in segment if char not in FORBIDDEN_CHARS).strip()
    if cleaned in {"", ".", ".."}:
        return EMPTY_SEGMENT_REPLACEMENT
    return cleaned


__all__ = ["EMPTY_SEGMENT_REPLACEMENT", "FORBIDDEN_CHARS", "sanitize_segment"]

"""
Summary: Validate and render directory templates.
Why: Import, relocation and the settings preview share one rendering path.
"""

from __future__ import annotations

from sharaku.shared.errors import TemplateValidationError
from sharaku.shared.work_metadata import WorkMetadata

from .placeholders import Placeholder, resolve_placeholder
from .sanitizer import sanitize_segment

SEGMENT_SEPARATOR = "/"


def validate_template(template: str) -> None:
    """Check template syntax.

    Raises:
        TemplateValidationError: The template is blank, has an unclosed or
            empty placeholder, names an unknown placeholder, or lacks ``{title}``.
    """

    if not template.strip():
        raise TemplateValidationError(template, "template is empty")

    has_title = False
    pos = 0
    while True:
        start = template.find("{", pos)
        if start < 0:
            break
        close = template.find("}", start)
        if close < 0:
            raise TemplateValidationError(template, "unclosed placeholder")
        name = template[start + 1 : close]
        if not name:
            raise TemplateValidationError(template, "empty placeholder")
        placeholder = Placeholder.parse(name)
        if placeholder is None:
            raise TemplateValidationError(template, f"unknown placeholder {{{name}}}")
        if placeholder is Placeholder.TITLE:
            has_title = True
        pos = close + 1

    if not has_title:
        raise TemplateValidationError(template, "{title} is required")


def _render_segment(segment: str, metadata: WorkMetadata) -> str:
    parts: list[str] = []
    pos = 0
    while pos < len(segment):
        start = segment.find("{", pos)
        if start < 0:
            parts.append(segment[pos:])
            break
        parts.append(segment[pos:start])
        close = segment.find("}", start)
        if close < 0:
            # Unclosed brace: keep it and continue after it.
            parts.append("{")
            pos = start + 1
            continue
        name = segment[start + 1 : close]
        placeholder = Placeholder.parse(name)
        if placeholder is None:
            parts.append(segment[start : close + 1])
        else:
            parts.append(resolve_placeholder(placeholder, metadata))
        pos = close + 1
    return sanitize_segment("".join(parts))


def render_template(template: str, metadata: WorkMetadata) -> str:
    """Render ``template`` into a ``/``-separated relative path.

    Each segment is substituted and sanitized independently, so metadata can
    never introduce extra separators.
    """

    return SEGMENT_SEPARATOR.join(
        _render_segment(segment, metadata) for segment in template.split(SEGMENT_SEPARATOR)
    )


def sample_metadata() -> WorkMetadata:
    """Fixed metadata shown in the settings preview."""

    return WorkMetadata(
        title="My Artwork",
        artist="Artist Name",
        year=2025,
        genre="Illustration",
        circle="Circle",
        origin="Original",
        work_type="Folder",
    )


def preview_template(template: str, metadata: WorkMetadata | None = None) -> str:
    """Validate ``template`` and render it against sample (or given) metadata."""

    validate_template(template)
    return render_template(template, metadata or sample_metadata())


__all__ = [
    "SEGMENT_SEPARATOR",
    "preview_template",
    "render_template",
    "sample_metadata",
    "validate_template",
]

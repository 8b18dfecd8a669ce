# Path: `src/sharaku/features/template/__init__.py`
# Summary: Export the directory template language.
# Why: Path resolution, import and relocation depend on one import surface.

from .domain.placeholders import UNKNOWN_VALUE, Placeholder, resolve_placeholder
from .domain.sanitizer import FORBIDDEN_CHARS, sanitize_segment
from .domain.template import (
    preview_template,
    render_template,
    sample_metadata,
    validate_template,
)

__all__ = [
    "FORBIDDEN_CHARS",
    "Placeholder",
    "UNKNOWN_VALUE",
    "preview_template",
    "render_template",
    "resolve_placeholder",
    "sample_metadata",
    "sanitize_segment",
    "validate_template",
]

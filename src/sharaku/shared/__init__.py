# Where: sharaku.shared.__init__
# What: Provide a concise import surface for shared value objects and errors.
# Why: Encourage consistent reuse of shared types across features.

"""Shared cross-cutting types exposed at the package level."""

from .errors import (
    DuplicateWorkPathError,
    NotFoundError,
    RelocationError,
    SharakuError,
    StoreError,
    TemplateValidationError,
    ThumbnailError,
    WorkImportError,
)
from .work_metadata import WorkMetadata
from .works import AppSettings, DEFAULT_TYPE_LABELS, WorkDetail, WorkRecord, WorkSummary, WorkType

__all__ = [
    "AppSettings",
    "DEFAULT_TYPE_LABELS",
    "DuplicateWorkPathError",
    "NotFoundError",
    "RelocationError",
    "SharakuError",
    "StoreError",
    "TemplateValidationError",
    "ThumbnailError",
    "WorkDetail",
    "WorkImportError",
    "WorkMetadata",
    "WorkRecord",
    "WorkSummary",
    "WorkType",
]

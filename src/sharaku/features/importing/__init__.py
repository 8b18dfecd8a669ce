# Path: `src/sharaku/features/importing/__init__.py`
# Summary: Export the import engine and its request/result types.
# Why: Application services wire adapters against one import surface.

from .domain.models import (
    BulkImportCompleted,
    BulkImportError,
    BulkImportEvent,
    BulkImportImporting,
    BulkImportStarted,
    BulkImportSummary,
    ImportMode,
    ImportRequest,
    ImportResult,
)
from .usecases.import_work import WorkImporter, paths_overlap, preview_import_path
from .usecases.ports import SettingsReader, ThumbnailGenerator, WorkWriter

__all__ = [
    "BulkImportCompleted",
    "BulkImportError",
    "BulkImportEvent",
    "BulkImportImporting",
    "BulkImportStarted",
    "BulkImportSummary",
    "ImportMode",
    "ImportRequest",
    "ImportResult",
    "SettingsReader",
    "ThumbnailGenerator",
    "WorkImporter",
    "WorkWriter",
    "paths_overlap",
    "preview_import_path",
]

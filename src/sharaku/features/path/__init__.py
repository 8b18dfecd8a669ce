# Path: `src/sharaku/features/path/__init__.py`
# Summary: Export path resolution and relocation planning.
# Why: Import and relocation engines share one import surface.

from .domain.plan import RelocationPlanItem
from .usecases.path_resolver import (
    INVALID_PATH_NAME,
    invalid_path,
    is_invalid_path,
    normalize_lexically,
    path_taken,
    resolve_unique_work_path,
    resolve_work_path,
    with_suffix,
)
from .usecases.relocation_plan import compute_relocation_plan

__all__ = [
    "INVALID_PATH_NAME",
    "RelocationPlanItem",
    "compute_relocation_plan",
    "invalid_path",
    "is_invalid_path",
    "normalize_lexically",
    "path_taken",
    "resolve_unique_work_path",
    "resolve_work_path",
    "with_suffix",
]

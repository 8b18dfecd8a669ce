# Path: `src/sharaku/features/scanner/__init__.py`
# Summary: Export folder discovery, image listing and folder-name parsing.
# Why: Import engine, viewer and CLI share one import surface.

from .domain.folder_name import ParsedMetadata, parse_folder_name
from .domain.models import DiscoveredFolder, ScanCompleted, ScanEvent, ScanningProgress
from .domain.natural_sort import natural_path_key, natural_sort_key
from .usecases.discovery import discover_image_folders
from .usecases.image_listing import IMAGE_EXTENSIONS, is_image_file, list_images_in_folder
from .usecases.ports import WorkRegistryReader

__all__ = [
    "DiscoveredFolder",
    "IMAGE_EXTENSIONS",
    "ParsedMetadata",
    "ScanCompleted",
    "ScanEvent",
    "ScanningProgress",
    "WorkRegistryReader",
    "discover_image_folders",
    "is_image_file",
    "list_images_in_folder",
    "natural_path_key",
    "natural_sort_key",
    "parse_folder_name",
]

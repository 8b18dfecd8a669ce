# Path: `src/sharaku/features/viewer/__init__.py`
# Summary: Export page locators and the page loader.
# Why: The CLI and library service read pages through one import surface.

from .domain.locator import VIEW_SCHEME, PageLocator, format_view_uri, parse_view_uri
from .usecases.load_page import DEFAULT_CONTENT_TYPE, PageContent, PageLoader, content_type_from_path
from .usecases.ports import WorkReader

__all__ = [
    "DEFAULT_CONTENT_TYPE",
    "PageContent",
    "PageLoader",
    "PageLocator",
    "VIEW_SCHEME",
    "WorkReader",
    "content_type_from_path",
    "format_view_uri",
    "parse_view_uri",
]

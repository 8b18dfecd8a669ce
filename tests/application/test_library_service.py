"""Tests for the library service."""

from __future__ import annotations

from pathlib import Path

import pytest

from sharaku.application.services.import_service import ImportService
from sharaku.application.services.library_service import LibraryService
from sharaku.features.importing import ImportRequest
from sharaku.shared.errors import NotFoundError, TemplateValidationError
from sharaku.shared.works import WorkType


def test_settings_round_trip(library: LibraryService, tmp_path: Path) -> None:
    root = library.set_library_root(tmp_path / "lib" / ".." / "lib")
    stored = library.set_directory_template("  {artist}/{title}  ")
    library.set_type_label(WorkType.FOLDER, " Manga ")

    settings = library.get_settings()

    assert root == (tmp_path / "lib").resolve()
    assert stored == "{artist}/{title}"
    assert settings.library_root == str(root)
    assert settings.directory_template == "{artist}/{title}"
    assert settings.type_label_folder == "Manga"


def test_blank_template_clears_setting(configured_library: LibraryService) -> None:
    assert configured_library.set_directory_template("   ") is None
    assert configured_library.get_settings().directory_template is None


def test_blank_label_restores_default(library: LibraryService) -> None:
    library.set_type_label(WorkType.IMAGE, "Pictures")
    library.set_type_label(WorkType.IMAGE, "")

    assert library.get_settings().type_label_image == "Image"


def test_invalid_template_is_not_stored(configured_library: LibraryService) -> None:
    with pytest.raises(TemplateValidationError):
        _ = configured_library.set_directory_template("{artist}")

    assert configured_library.get_settings().directory_template == "{artist}/{title}"


def test_preview_template(library: LibraryService) -> None:
    assert library.preview_template("{circle}/{title}") == "Circle/My Artwork"


def test_works_queries(configured_library: LibraryService, db_path: Path, incoming: Path) -> None:
    result = ImportService(db_path=db_path).import_work(
        ImportRequest(source_path=incoming / "[Artist] First", title="First", artist="Artist")
    )

    works = configured_library.list_works()
    assert [work.title for work in works] == ["First"]
    work_id = works[0].id

    detail = configured_library.get_work(work_id)
    assert detail.path == str(result.destination_path)
    assert configured_library.get_thumbnail(work_id)

    page = configured_library.load_page(work_id, 1)
    assert page.content_type == "image/png"
    assert page.data == (result.destination_path / "2.png").read_bytes()


def test_missing_work_raises(library: LibraryService) -> None:
    with pytest.raises(NotFoundError):
        _ = library.get_work(1)
    with pytest.raises(NotFoundError):
        _ = library.get_thumbnail(1)
    with pytest.raises(NotFoundError):
        _ = library.load_page(1, 0)

"""Tests for CLI functionality."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from sharaku.application.services.library_service import LibraryService
from sharaku.shared.errors import SharakuError
from sharaku.ui.cli import CommandProcessor

ImageWriter = Callable[..., Path]


@pytest.fixture(autouse=True)
def _isolated(data_dir: Path, setup_logger_mock: MagicMock) -> None:
    _ = data_dir, setup_logger_mock


def _run(*argv: str) -> None:
    CommandProcessor.process_command(list(argv))


def _exit_code(*argv: str) -> int | str | None:
    with pytest.raises(SystemExit) as excinfo:
        _run(*argv)
    return excinfo.value.code


def test_full_workflow(tmp_path: Path, write_image: ImageWriter) -> None:
    library_root = tmp_path / "library"
    incoming = tmp_path / "incoming"
    _ = write_image(incoming / "[Artist] Title" / "1.png")
    _ = write_image(incoming / "[Artist] Title" / "2.png")
    _ = write_image(incoming / "Loose" / "cover.jpg")

    _run("settings", "set-root", str(library_root), "--quiet")
    _run("settings", "set-template", "{artist}/{title}", "--quiet")
    _run("bulk-import", str(incoming), "--quiet")

    library = LibraryService()
    works = library.list_works("title", "asc")
    assert [work.title for work in works] == ["Loose", "Title"]
    assert (library_root.resolve() / "Artist" / "Title" / "2.png").exists()

    _run("relocate", "{title}", "--quiet")
    assert (library_root.resolve() / "Title" / "1.png").exists()
    assert library.get_settings().directory_template == "{title}"

    page_file = tmp_path / "out" / "page.png"
    _run("page", f"sharaku://view/{works[1].id}/1", "--output", str(page_file), "--quiet")
    assert page_file.read_bytes() == (library_root.resolve() / "Title" / "2.png").read_bytes()

    thumb_file = tmp_path / "out" / "thumb.webp"
    _run("works", "thumbnail", str(works[0].id), "--output", str(thumb_file), "--quiet")
    assert thumb_file.read_bytes()[:4] == b"RIFF"


def test_second_bulk_import_skips_registered(tmp_path: Path, write_image: ImageWriter) -> None:
    library_root = tmp_path / "library"
    _ = write_image(library_root / "Artist - Work" / "1.png")

    _run("settings", "set-root", str(library_root), "--quiet")
    _run("settings", "set-template", "{artist}/{title}", "--quiet")
    _run("bulk-import", str(library_root), "--move", "--quiet")
    _run("bulk-import", str(library_root), "--move", "--quiet")

    assert not (library_root / "Artist - Work").exists()
    assert len(LibraryService().list_works()) == 1


def test_import_without_settings_fails(tmp_path: Path, write_image: ImageWriter) -> None:
    source = write_image(tmp_path / "src" / "1.png").parent

    assert _exit_code("import", str(source), "--title", "T", "--quiet") == 1


def test_invalid_template_fails() -> None:
    assert _exit_code("template", "validate", "{artist}") == 1
    assert _exit_code("settings", "set-template", "{bogus}/{title}") == 1


def test_missing_work_fails(tmp_path: Path) -> None:
    assert _exit_code("works", "show", "42") == 1
    assert _exit_code("page", "42", "--output", str(tmp_path / "p.png")) == 1


def test_relocate_without_root_fails() -> None:
    assert _exit_code("relocate", "{title}") == 1


def test_keyboard_interrupt_exits_130(mocker: MockerFixture) -> None:
    _ = mocker.patch.object(CommandProcessor, "_dispatch", side_effect=KeyboardInterrupt)

    assert _exit_code("settings", "show") == 130


def test_unexpected_error_exits_1(mocker: MockerFixture) -> None:
    _ = mocker.patch.object(CommandProcessor, "_dispatch", side_effect=RuntimeError("boom"))

    assert _exit_code("settings", "show") == 1


def test_library_error_exits_1(mocker: MockerFixture) -> None:
    _ = mocker.patch.object(CommandProcessor, "_dispatch", side_effect=SharakuError("nope"))

    assert _exit_code("settings", "show") == 1


def test_failed_command_exits_1(mocker: MockerFixture) -> None:
    _ = mocker.patch.object(CommandProcessor, "_dispatch", return_value=False)

    assert _exit_code("settings", "show") == 1


def test_successful_command_returns(mocker: MockerFixture) -> None:
    dispatch = mocker.patch.object(CommandProcessor, "_dispatch", return_value=True)

    _run("template", "preview", "{title}")

    dispatch.assert_called_once()

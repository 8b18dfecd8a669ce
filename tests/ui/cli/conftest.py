"""Fixtures isolating CLI runs from the real data directory and log setup."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture


@pytest.fixture
def data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the default metadata store at a temporary directory."""

    directory = tmp_path / "data"
    monkeypatch.setenv("SHARAKU_DATA_DIR", str(directory))
    return directory


@pytest.fixture
def setup_logger_mock(mocker: MockerFixture) -> MagicMock:
    return mocker.patch("sharaku.ui.cli.args.parser.setup_logger")

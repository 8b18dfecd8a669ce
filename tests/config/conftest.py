"""Fixtures that point configuration lookups at a throwaway repository root."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

import sharaku.config.config as config_module
import sharaku.config.paths as paths_module


@pytest.fixture
def portable_repo_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Make ``tmp_path`` the detected repository root for this test."""

    _ = (tmp_path / "pyproject.toml").write_text("[project]\nname = 'scratch'\n", encoding="utf-8")
    monkeypatch.setattr(paths_module, "_detect_repo_root", lambda _start=None: tmp_path)
    monkeypatch.delenv(paths_module.DATA_DIR_ENV, raising=False)
    return tmp_path


@pytest.fixture
def config_runtime_env(portable_repo_root: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Load a fresh ``Config`` from the scratch root and restore the old one afterwards."""

    _ = portable_repo_root
    monkeypatch.setattr(config_module.Config, "_instance", None)
    monkeypatch.setattr(config_module.Config, "_loaded_from", None)
    monkeypatch.setattr(config_module, "config", config_module.Config.load())
    yield None

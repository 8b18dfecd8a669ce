"""Smoke tests for unified entry points.

These tests assert that `python -m sharaku` and the console script
both resolve to the CLI's `main` function exposed under `sharaku.ui.cli`.
"""

from importlib import import_module


def test_module_entry_point_exposes_main() -> None:
    """`python -m sharaku` path exposes a `main` callable."""
    m = import_module("sharaku.__main__")
    assert hasattr(m, "main")


def test_console_script_target_exposes_main() -> None:
    """Console script points to `sharaku.ui.cli:main` and is importable."""
    m = import_module("sharaku.ui.cli")
    assert hasattr(m, "main")


def test_package_version() -> None:
    m = import_module("sharaku")
    assert m.__version__ == "0.1.0"

"""Command line argument handling package."""

from sharaku.ui.cli.args.options import (
    BulkImportArgs,
    CLIArgs,
    ImportArgs,
    PageArgs,
    RelocateArgs,
    ScanArgs,
    SettingsArgs,
    TemplateArgs,
    WorksArgs,
)
from sharaku.ui.cli.args.parser import ArgumentParser

__all__ = [
    "ArgumentParser",
    "BulkImportArgs",
    "CLIArgs",
    "ImportArgs",
    "PageArgs",
    "RelocateArgs",
    "ScanArgs",
    "SettingsArgs",
    "TemplateArgs",
    "WorksArgs",
]

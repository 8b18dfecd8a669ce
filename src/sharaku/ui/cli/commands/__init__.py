"""Command execution package for CLI."""

from sharaku.ui.cli.commands.import_work import BulkImportCommand, ImportCommand
from sharaku.ui.cli.commands.relocate import RelocateCommand
from sharaku.ui.cli.commands.scan import ScanCommand
from sharaku.ui.cli.commands.settings import SettingsCommand, TemplateCommand
from sharaku.ui.cli.commands.works import PageCommand, WorksCommand

__all__ = [
    "BulkImportCommand",
    "ImportCommand",
    "PageCommand",
    "RelocateCommand",
    "ScanCommand",
    "SettingsCommand",
    "TemplateCommand",
    "WorksCommand",
]

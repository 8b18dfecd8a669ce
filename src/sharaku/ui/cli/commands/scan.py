"""Scan command implementation for the CLI."""

from __future__ import annotations

from typing import final

from sharaku.application.services.import_service import ImportService
from sharaku.ui.cli.args.options import ScanArgs
from sharaku.ui.cli.display.progress import ProgressDisplay
from sharaku.ui.cli.display.result import ResultDisplay


@final
class ScanCommand:
    """List image folders under a directory with their registration status."""

    def __init__(self, args: ScanArgs, service: ImportService | None = None) -> None:
        self.args = args
        self.service = service or ImportService()
        self.progress = ProgressDisplay(quiet=args.quiet)
        self.display = ResultDisplay(quiet=args.quiet)

    def execute(self) -> bool:
        folders = self.progress.run_scan(lambda sink: self.service.discover(self.args.root, sink))
        self.display.show_discovered(folders)
        return True


__all__ = ["ScanCommand"]

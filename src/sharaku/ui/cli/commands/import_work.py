"""Import and bulk-import commands for the CLI."""

from __future__ import annotations

from typing import final

from sharaku.application.services.import_service import ImportService
from sharaku.features.importing import ImportRequest
from sharaku.platform.logging import logger
from sharaku.ui.cli.args.options import BulkImportArgs, ImportArgs
from sharaku.ui.cli.display.progress import ProgressDisplay
from sharaku.ui.cli.display.result import ResultDisplay


@final
class ImportCommand:
    """Import a single folder with metadata given on the command line."""

    def __init__(self, args: ImportArgs, service: ImportService | None = None) -> None:
        self.args = args
        self.service = service or ImportService()
        self.display = ResultDisplay(quiet=args.quiet)

    def execute(self) -> bool:
        request = ImportRequest(
            source_path=self.args.source,
            title=self.args.title,
            artist=self.args.artist,
            year=self.args.year,
            genre=self.args.genre,
            circle=self.args.circle,
            origin=self.args.origin,
            mode=self.args.mode,
        )
        result = self.service.import_work(request)
        self.display.show_import(result)
        return True


@final
class BulkImportCommand:
    """Discover folders under a root and import each with parsed metadata."""

    def __init__(self, args: BulkImportArgs, service: ImportService | None = None) -> None:
        self.args = args
        self.service = service or ImportService()
        self.progress = ProgressDisplay(quiet=args.quiet)
        self.display = ResultDisplay(quiet=args.quiet)

    def execute(self) -> bool:
        folders = self.progress.run_scan(lambda sink: self.service.discover(self.args.root, sink))
        candidates = [
            folder for folder in folders if self.args.include_registered or not folder.already_registered
        ]
        skipped = len(folders) - len(candidates)
        if skipped:
            logger.info("Skipping %d already registered folder(s)", skipped)
        if not candidates:
            self.display.show_message("[yellow]Nothing to import.[/yellow]")
            return True

        requests = [
            ImportRequest(
                source_path=folder.path,
                title=folder.parsed_metadata.title,
                artist=folder.parsed_metadata.artist,
                mode=self.args.mode,
            )
            for folder in candidates
        ]
        summary = self.progress.run_bulk_import(lambda sink: self.service.bulk_import(requests, sink))
        self.display.show_bulk_summary(summary)
        return summary.failed == 0


__all__ = ["BulkImportCommand", "ImportCommand"]

"""Library inspection commands for the CLI."""

from __future__ import annotations

from typing import final

from sharaku.application.services.library_service import LibraryService
from sharaku.platform.filesystem import ensure_parent_directory
from sharaku.ui.cli.args.options import PageArgs, WorksArgs
from sharaku.ui.cli.display.result import ResultDisplay


@final
class WorksCommand:
    """List works, show one, or export its thumbnail."""

    def __init__(self, args: WorksArgs, service: LibraryService | None = None) -> None:
        self.args = args
        self.service = service or LibraryService()
        self.display = ResultDisplay(quiet=args.quiet)

    def execute(self) -> bool:
        if self.args.action == "list":
            self.display.show_works(self.service.list_works(self.args.sort_by, self.args.sort_order))
            return True

        assert self.args.work_id is not None
        if self.args.action == "show":
            self.display.show_work(self.service.get_work(self.args.work_id))
            return True

        assert self.args.output is not None
        data = self.service.get_thumbnail(self.args.work_id)
        _ = ensure_parent_directory(self.args.output)
        _ = self.args.output.write_bytes(data)
        self.display.show_message(f"[green]Wrote thumbnail ({len(data)} bytes) to[/green] {self.args.output}")
        return True


@final
class PageCommand:
    """Export one page of a work to a file."""

    def __init__(self, args: PageArgs, service: LibraryService | None = None) -> None:
        self.args = args
        self.service = service or LibraryService()
        self.display = ResultDisplay(quiet=args.quiet)

    def execute(self) -> bool:
        locator = self.args.locator
        page = self.service.load_page(locator.work_id, locator.page_index)
        _ = ensure_parent_directory(self.args.output)
        _ = self.args.output.write_bytes(page.data)
        self.display.show_message(
            f"[green]Wrote page {locator.page_index} ({page.content_type}) to[/green] {self.args.output}"
        )
        return True


__all__ = ["PageCommand", "WorksCommand"]

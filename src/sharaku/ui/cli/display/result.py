"""Tables and summaries printed by CLI commands."""

from __future__ import annotations

from collections.abc import Sequence
from typing import final

from rich.console import Console
from rich.table import Table

from sharaku.features.importing import BulkImportSummary, ImportResult
from sharaku.features.relocation import RelocationPlanItem, RelocationSummary
from sharaku.features.scanner import DiscoveredFolder
from sharaku.features.viewer import format_view_uri
from sharaku.shared.works import AppSettings, WorkDetail, WorkSummary


def _or_dash(value: object | None) -> str:
    return "-" if value is None or value == "" else str(value)


@final
class ResultDisplay:
    """Render command results on stdout."""

    def __init__(self, console: Console | None = None, *, quiet: bool = False) -> None:
        self.console = console or Console()
        self.quiet = quiet

    def show_settings(self, settings: AppSettings) -> None:
        table = Table(title="Library Settings", show_header=False)
        table.add_column("Key", style="cyan")
        table.add_column("Value")
        table.add_row("library_root", _or_dash(settings.library_root))
        table.add_row("directory_template", _or_dash(settings.directory_template))
        table.add_row("type_label_image", settings.type_label_image)
        table.add_row("type_label_folder", settings.type_label_folder)
        self.console.print(table)

    def show_message(self, message: str) -> None:
        if not self.quiet:
            self.console.print(message)

    def show_discovered(self, folders: Sequence[DiscoveredFolder]) -> None:
        if self.quiet:
            return
        if not folders:
            self.console.print("[yellow]No folders with images found.[/yellow]")
            return
        table = Table(title=f"Discovered Folders ({len(folders)})")
        table.add_column("Path", style="cyan", overflow="fold")
        table.add_column("Images", justify="right")
        table.add_column("Title")
        table.add_column("Artist")
        table.add_column("Registered", justify="center")
        for folder in folders:
            table.add_row(
                str(folder.path),
                str(folder.image_count),
                folder.parsed_metadata.title,
                _or_dash(folder.parsed_metadata.artist),
                "[green]yes[/green]" if folder.already_registered else "no",
            )
        self.console.print(table)

    def show_import(self, result: ImportResult) -> None:
        self.show_message(
            f"[green]Imported {result.page_count} page(s) to[/green] {result.destination_path}"
        )

    def show_bulk_summary(self, summary: BulkImportSummary) -> None:
        if self.quiet:
            return
        self.console.print("\n[bold]Bulk Import Summary:[/bold]")
        self.console.print(f"[green]Imported: {summary.succeeded}[/green]")
        if summary.failed:
            self.console.print(f"[red]Failed: {summary.failed}[/red]")

    def show_plan(self, plan: Sequence[RelocationPlanItem]) -> None:
        if self.quiet:
            return
        if not plan:
            self.console.print("[green]All works already match the template.[/green]")
            return
        table = Table(title=f"Relocation Plan ({len(plan)})")
        table.add_column("ID", justify="right")
        table.add_column("Title")
        table.add_column("From", style="red", overflow="fold")
        table.add_column("To", style="green", overflow="fold")
        for item in plan:
            table.add_row(str(item.work_id), item.title, item.old_path, item.new_path)
        self.console.print(table)

    def show_relocation_summary(self, summary: RelocationSummary) -> None:
        if self.quiet:
            return
        self.console.print("\n[bold]Relocation Summary:[/bold]")
        self.console.print(f"[green]Relocated: {summary.relocated}[/green]")
        if summary.skipped:
            self.console.print(f"[yellow]Skipped: {summary.skipped}[/yellow]")
        if summary.failed:
            self.console.print(f"[red]Failed: {summary.failed}[/red]")

    def show_works(self, works: Sequence[WorkSummary]) -> None:
        if not works:
            self.show_message("[yellow]The library is empty.[/yellow]")
            return
        table = Table(title=f"Works ({len(works)})")
        table.add_column("ID", justify="right")
        table.add_column("Title")
        table.add_column("Type")
        table.add_column("Pages", justify="right")
        table.add_column("Added")
        for work in works:
            table.add_row(
                str(work.id),
                work.title,
                work.work_type.value,
                str(work.page_count),
                work.created_at,
            )
        self.console.print(table)

    def show_work(self, work: WorkDetail) -> None:
        table = Table(title=f"Work {work.id}", show_header=False)
        table.add_column("Field", style="cyan")
        table.add_column("Value", overflow="fold")
        table.add_row("title", work.title)
        table.add_row("path", work.path)
        table.add_row("type", work.work_type.value)
        table.add_row("pages", str(work.page_count))
        table.add_row("artist", _or_dash(work.artist))
        table.add_row("year", _or_dash(work.year))
        table.add_row("genre", _or_dash(work.genre))
        table.add_row("circle", _or_dash(work.circle))
        table.add_row("origin", _or_dash(work.origin))
        table.add_row("added", work.created_at)
        table.add_row("first page", format_view_uri(work.id, 0))
        self.console.print(table)


__all__ = ["ResultDisplay"]

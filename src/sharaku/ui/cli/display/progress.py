"""Progress display functionality for CLI."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, final

from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, SpinnerColumn, TaskID, TextColumn

from sharaku.features.importing import (
    BulkImportCompleted,
    BulkImportError,
    BulkImportEvent,
    BulkImportImporting,
    BulkImportStarted,
)
from sharaku.features.relocation import (
    RelocationCompleted,
    RelocationEvent,
    RelocationFailed,
    RelocationMoving,
    RelocationStarted,
)
from sharaku.features.scanner import ScanCompleted, ScanEvent, ScanningProgress
from sharaku.platform.logging import LibraryRichHandler, logger

ResultT = TypeVar("ResultT")


def shared_console() -> Console:
    """Console used by the logging handler, so bars and log lines interleave cleanly."""

    for handler in logger.handlers:
        if isinstance(handler, LibraryRichHandler):
            return handler.console
    return Console(stderr=True)


@final
class ProgressDisplay:
    """Render progress events from long-running library operations."""

    def __init__(self, *, quiet: bool = False) -> None:
        self.quiet = quiet
        self.console = shared_console()

    def _progress(self, *, determinate: bool) -> Progress:
        columns: list[Any] = [SpinnerColumn(), TextColumn("{task.description}")]
        if determinate:
            columns.extend([BarColumn(), MofNCompleteColumn()])
        return Progress(
            *columns,
            console=self.console,
            transient=True,
            disable=self.quiet,
        )

    def run_scan(self, operation: Callable[[Callable[[ScanEvent], None]], ResultT]) -> ResultT:
        """Run ``operation`` with a spinner fed by scan events."""

        with self._progress(determinate=False) as progress:
            task_id = progress.add_task("[cyan]Scanning directories...", total=None)

            def on_event(event: ScanEvent) -> None:
                if isinstance(event, ScanningProgress):
                    _ = progress.update(
                        task_id,
                        description=f"[cyan]Scanning directories... {event.scanned_dirs}",
                    )
                elif isinstance(event, ScanCompleted):
                    _ = progress.update(task_id, description=f"[green]Found {event.found} folders")

            return operation(on_event)

    def run_bulk_import(
        self,
        operation: Callable[[Callable[[BulkImportEvent], None]], ResultT],
    ) -> ResultT:
        """Run ``operation`` with a bar fed by bulk import events."""

        errors: list[BulkImportError] = []
        with self._progress(determinate=True) as progress:
            task_id: TaskID | None = None

            def on_event(event: BulkImportEvent) -> None:
                nonlocal task_id
                if isinstance(event, BulkImportStarted):
                    task_id = progress.add_task("[cyan]Importing...", total=event.total)
                elif isinstance(event, BulkImportImporting) and task_id is not None:
                    _ = progress.update(
                        task_id,
                        completed=event.current - 1,
                        description=f"[cyan]Importing {event.title}",
                    )
                elif isinstance(event, BulkImportError):
                    errors.append(event)
                elif isinstance(event, BulkImportCompleted) and task_id is not None:
                    _ = progress.update(task_id, completed=event.succeeded + event.failed)

            result = operation(on_event)

        if errors and not self.quiet:
            self.console.print(f"[bold red]{len(errors)} folder(s) failed to import:[/bold red]")
            for error in errors:
                self.console.print(f"[red]  • {error.title}: {error.message}[/red]")
        return result

    def run_relocation(
        self,
        operation: Callable[[Callable[[RelocationEvent], None]], ResultT],
    ) -> ResultT:
        """Run ``operation`` with a bar fed by relocation events."""

        failures: list[str] = []
        with self._progress(determinate=True) as progress:
            task_id: TaskID | None = None

            def on_event(event: RelocationEvent) -> None:
                nonlocal task_id
                if isinstance(event, RelocationStarted):
                    task_id = progress.add_task("[cyan]Relocating...", total=event.total)
                elif isinstance(event, RelocationMoving) and task_id is not None:
                    _ = progress.update(
                        task_id,
                        completed=event.current - 1,
                        description=f"[cyan]Moving {event.title}",
                    )
                elif isinstance(event, RelocationFailed):
                    failures.append(event.message)
                elif isinstance(event, RelocationCompleted) and task_id is not None:
                    total = event.relocated + event.skipped + event.failed
                    _ = progress.update(task_id, completed=total)

            result = operation(on_event)

        if failures and not self.quiet:
            for message in failures:
                self.console.print(f"[red]  • {message}[/red]")
        return result


__all__ = ["ProgressDisplay", "shared_console"]

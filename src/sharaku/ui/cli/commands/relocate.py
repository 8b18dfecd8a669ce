"""Relocate command implementation for the CLI."""

from __future__ import annotations

from typing import final

from sharaku.application.services.relocation_service import RelocationService
from sharaku.ui.cli.args.options import RelocateArgs
from sharaku.ui.cli.display.progress import ProgressDisplay
from sharaku.ui.cli.display.result import ResultDisplay


@final
class RelocateCommand:
    """Preview or apply a new directory template to every folder work."""

    def __init__(self, args: RelocateArgs, service: RelocationService | None = None) -> None:
        self.args = args
        self.service = service or RelocationService()
        self.progress = ProgressDisplay(quiet=args.quiet)
        self.display = ResultDisplay(quiet=args.quiet)

    def execute(self) -> bool:
        if self.args.dry_run:
            self.display.show_plan(self.service.preview(self.args.template))
            return True

        summary = self.progress.run_relocation(
            lambda sink: self.service.execute(self.args.template, sink)
        )
        self.display.show_relocation_summary(summary)
        return summary.failed == 0


__all__ = ["RelocateCommand"]

"""Settings and template commands for the CLI."""

from __future__ import annotations

from typing import final

from sharaku.application.services.library_service import LibraryService
from sharaku.features.template import validate_template
from sharaku.ui.cli.args.options import SettingsArgs, TemplateArgs
from sharaku.ui.cli.display.result import ResultDisplay


@final
class SettingsCommand:
    """Show or update the settings stored in the metadata store."""

    def __init__(self, args: SettingsArgs, service: LibraryService | None = None) -> None:
        self.args = args
        self.service = service or LibraryService()
        self.display = ResultDisplay(quiet=args.quiet)

    def execute(self) -> bool:
        action = self.args.action
        value = self.args.value or ""

        if action == "set-root":
            root = self.service.set_library_root(value)
            self.display.show_message(f"[green]Library root:[/green] {root}")
        elif action == "set-template":
            stored = self.service.set_directory_template(value)
            self.display.show_message(
                f"[green]Directory template:[/green] {stored}" if stored else "[yellow]Directory template cleared[/yellow]"
            )
        elif action == "set-label":
            assert self.args.work_type is not None
            self.service.set_type_label(self.args.work_type, value)

        if action == "show" or not self.args.quiet:
            self.display.show_settings(self.service.get_settings())
        return True


@final
class TemplateCommand:
    """Validate or preview a directory template without storing it."""

    def __init__(self, args: TemplateArgs, service: LibraryService | None = None) -> None:
        self.args = args
        self.service = service or LibraryService()
        self.display = ResultDisplay(quiet=args.quiet)

    def execute(self) -> bool:
        if self.args.action == "validate":
            validate_template(self.args.template)
            self.display.show_message("[green]Template is valid[/green]")
            return True

        rendered = self.service.preview_template(self.args.template)
        self.display.console.print(rendered)
        return True


__all__ = ["SettingsCommand", "TemplateCommand"]

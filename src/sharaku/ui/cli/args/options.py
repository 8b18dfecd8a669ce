"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final

from sharaku.features.importing import ImportMode
from sharaku.features.viewer import PageLocator
from sharaku.shared.works import WorkType


@final
@dataclass(slots=True)
class SettingsArgs:
    """Command line arguments for the ``settings`` subcommand."""

    command: Literal["settings"]
    action: Literal["show", "set-root", "set-template", "set-label"]
    value: str | None
    work_type: WorkType | None
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class TemplateArgs:
    """Command line arguments for the ``template`` subcommand."""

    command: Literal["template"]
    action: Literal["validate", "preview"]
    template: str
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class ScanArgs:
    """Command line arguments for the ``scan`` subcommand."""

    command: Literal["scan"]
    root: Path
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class ImportArgs:
    """Command line arguments for the ``import`` subcommand."""

    command: Literal["import"]
    source: Path
    title: str
    artist: str | None
    year: int | None
    genre: str | None
    circle: str | None
    origin: str | None
    mode: ImportMode
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class BulkImportArgs:
    """Command line arguments for the ``bulk-import`` subcommand."""

    command: Literal["bulk-import"]
    root: Path
    mode: ImportMode
    include_registered: bool
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class RelocateArgs:
    """Command line arguments for the ``relocate`` subcommand."""

    command: Literal["relocate"]
    template: str
    dry_run: bool
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class WorksArgs:
    """Command line arguments for the ``works`` subcommand."""

    command: Literal["works"]
    action: Literal["list", "show", "thumbnail"]
    work_id: int | None
    sort_by: str
    sort_order: str
    output: Path | None
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class PageArgs:
    """Command line arguments for the ``page`` subcommand."""

    command: Literal["page"]
    locator: PageLocator
    output: Path
    verbose: bool
    quiet: bool


CLIArgs = (
    SettingsArgs
    | TemplateArgs
    | ScanArgs
    | ImportArgs
    | BulkImportArgs
    | RelocateArgs
    | WorksArgs
    | PageArgs
)

__all__ = [
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

"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from sharaku.config.config import Config
from sharaku.features.importing import ImportMode
from sharaku.features.viewer import PageLocator, parse_view_uri
from sharaku.platform.db.daos.works_dao import SORT_COLUMNS, SORT_ORDERS
from sharaku.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from sharaku.shared.works import WorkType
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


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="sharaku",
            description="Sharaku - organize an illustration and manga library by directory template.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        settings_parser = subparsers.add_parser("settings", help="Show or change library settings")
        settings_actions = settings_parser.add_subparsers(dest="action", required=True)
        ArgumentParser._add_output_flags(settings_actions.add_parser("show", help="Show current settings"))
        set_root = settings_actions.add_parser("set-root", help="Set the library root directory")
        _ = set_root.add_argument("value", metavar="PATH", help="Library root directory")
        ArgumentParser._add_output_flags(set_root)
        set_template = settings_actions.add_parser(
            "set-template",
            help="Set the directory template (an empty string clears it)",
        )
        _ = set_template.add_argument("value", metavar="TEMPLATE", help="Template such as '{artist}/{title}'")
        ArgumentParser._add_output_flags(set_template)
        set_label = settings_actions.add_parser("set-label", help="Set the {type} label of a work kind")
        _ = set_label.add_argument(
            "work_type",
            choices=[work_type.value for work_type in WorkType],
            help="Work kind the label applies to",
        )
        _ = set_label.add_argument("value", metavar="LABEL", help="Label text (empty restores the default)")
        ArgumentParser._add_output_flags(set_label)

        template_parser = subparsers.add_parser("template", help="Validate or preview a directory template")
        template_actions = template_parser.add_subparsers(dest="action", required=True)
        for action, help_text in (
            ("validate", "Check template syntax"),
            ("preview", "Render the template with sample metadata"),
        ):
            action_parser = template_actions.add_parser(action, help=help_text)
            _ = action_parser.add_argument("template", metavar="TEMPLATE")
            ArgumentParser._add_output_flags(action_parser)

        scan_parser = subparsers.add_parser("scan", help="List folders that contain images")
        _ = scan_parser.add_argument("root", metavar="ROOT", help="Directory to scan recursively")
        ArgumentParser._add_output_flags(scan_parser)

        import_parser = subparsers.add_parser("import", help="Import one folder into the library")
        _ = import_parser.add_argument("source", metavar="SOURCE", help="Folder holding the images")
        _ = import_parser.add_argument("--title", required=True, help="Work title")
        _ = import_parser.add_argument("--artist", help="Artist name")
        _ = import_parser.add_argument("--year", type=int, help="Publication year")
        _ = import_parser.add_argument("--genre", help="Genre")
        _ = import_parser.add_argument("--circle", help="Circle name")
        _ = import_parser.add_argument("--origin", help="Origin or series")
        ArgumentParser._add_mode_flag(import_parser)
        ArgumentParser._add_output_flags(import_parser)

        bulk_parser = subparsers.add_parser(
            "bulk-import",
            help="Import every image folder found under a directory",
        )
        _ = bulk_parser.add_argument("root", metavar="ROOT", help="Directory to scan recursively")
        _ = bulk_parser.add_argument(
            "--include-registered",
            action="store_true",
            help="Also import folders whose path is already registered",
        )
        ArgumentParser._add_mode_flag(bulk_parser)
        ArgumentParser._add_output_flags(bulk_parser)

        relocate_parser = subparsers.add_parser(
            "relocate",
            help="Move folder works to match a new directory template",
        )
        _ = relocate_parser.add_argument("template", metavar="TEMPLATE")
        _ = relocate_parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Show the relocation plan without moving files",
        )
        ArgumentParser._add_output_flags(relocate_parser)

        works_parser = subparsers.add_parser("works", help="Inspect registered works")
        works_actions = works_parser.add_subparsers(dest="action", required=True)
        list_parser = works_actions.add_parser("list", help="List registered works")
        _ = list_parser.add_argument("--sort-by", choices=sorted(SORT_COLUMNS), default="created_at")
        _ = list_parser.add_argument("--sort-order", choices=sorted(SORT_ORDERS), default="desc")
        ArgumentParser._add_output_flags(list_parser)
        show_parser = works_actions.add_parser("show", help="Show one work")
        _ = show_parser.add_argument("work_id", type=int, metavar="WORK_ID")
        ArgumentParser._add_output_flags(show_parser)
        thumb_parser = works_actions.add_parser("thumbnail", help="Write a work's thumbnail to a file")
        _ = thumb_parser.add_argument("work_id", type=int, metavar="WORK_ID")
        _ = thumb_parser.add_argument("--output", required=True, metavar="FILE")
        ArgumentParser._add_output_flags(thumb_parser)

        page_parser = subparsers.add_parser("page", help="Write one page of a work to a file")
        _ = page_parser.add_argument(
            "locator",
            metavar="URI_OR_ID",
            help="A sharaku://view/<id>/<page> locator or a work id",
        )
        _ = page_parser.add_argument("page", nargs="?", type=int, default=None, metavar="PAGE")
        _ = page_parser.add_argument("--output", required=True, metavar="FILE")
        ArgumentParser._add_output_flags(page_parser)

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If arguments fail validation.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str = parsed_args.command
        verbose, quiet = is_verbose, is_quiet

        if command == "settings":
            return SettingsArgs(
                command="settings",
                action=parsed_args.action,
                value=getattr(parsed_args, "value", None),
                work_type=WorkType(parsed_args.work_type) if getattr(parsed_args, "work_type", None) else None,
                verbose=verbose,
                quiet=quiet,
            )

        if command == "template":
            return TemplateArgs(
                command="template",
                action=parsed_args.action,
                template=parsed_args.template,
                verbose=verbose,
                quiet=quiet,
            )

        if command == "scan":
            return ScanArgs(
                command="scan",
                root=ArgumentParser._existing_directory(parsed_args.root, "Scan root"),
                verbose=verbose,
                quiet=quiet,
            )

        if command == "import":
            return ImportArgs(
                command="import",
                source=ArgumentParser._existing_directory(parsed_args.source, "Source folder"),
                title=parsed_args.title,
                artist=parsed_args.artist,
                year=parsed_args.year,
                genre=parsed_args.genre,
                circle=parsed_args.circle,
                origin=parsed_args.origin,
                mode=ImportMode.MOVE if parsed_args.move else ImportMode.COPY,
                verbose=verbose,
                quiet=quiet,
            )

        if command == "bulk-import":
            return BulkImportArgs(
                command="bulk-import",
                root=ArgumentParser._existing_directory(parsed_args.root, "Import root"),
                mode=ImportMode.MOVE if parsed_args.move else ImportMode.COPY,
                include_registered=parsed_args.include_registered,
                verbose=verbose,
                quiet=quiet,
            )

        if command == "relocate":
            return RelocateArgs(
                command="relocate",
                template=parsed_args.template,
                dry_run=parsed_args.dry_run,
                verbose=verbose,
                quiet=quiet,
            )

        if command == "works":
            return ArgumentParser._process_works(parsed_args, verbose, quiet)

        if command == "page":
            return PageArgs(
                command="page",
                locator=ArgumentParser._page_locator(parsed_args.locator, parsed_args.page),
                output=Path(parsed_args.output),
                verbose=verbose,
                quiet=quiet,
            )

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _add_output_flags(parser: argparse.ArgumentParser) -> None:
        group = parser.add_mutually_exclusive_group()
        _ = group.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed processing information",
        )
        _ = group.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def _add_mode_flag(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument(
            "--move",
            action="store_true",
            help="Delete the source images after they are registered in the library",
        )

    @staticmethod
    def _existing_directory(raw: str, label: str) -> Path:
        path = Path(raw).expanduser()
        if not path.is_dir():
            logger.error("%s does not exist or is not a directory: %s", label, path)
            sys.exit(1)
        return path.resolve()

    @staticmethod
    def _process_works(parsed_args: argparse.Namespace, verbose: bool, quiet: bool) -> WorksArgs:
        output = getattr(parsed_args, "output", None)
        return WorksArgs(
            command="works",
            action=parsed_args.action,
            work_id=getattr(parsed_args, "work_id", None),
            sort_by=getattr(parsed_args, "sort_by", "created_at"),
            sort_order=getattr(parsed_args, "sort_order", "desc"),
            output=Path(output) if output else None,
            verbose=verbose,
            quiet=quiet,
        )

    @staticmethod
    def _page_locator(raw: str, page: int | None) -> PageLocator:
        """Accept either a view URI or a work id with an optional page index."""

        if raw.isdigit():
            return PageLocator(work_id=int(raw), page_index=page if page is not None else 0)

        locator = parse_view_uri(raw)
        if locator is None:
            logger.error("Not a page locator or work id: %s", raw)
            sys.exit(1)
        if page is not None:
            logger.error("PAGE cannot be combined with a view locator")
            sys.exit(1)
        return locator

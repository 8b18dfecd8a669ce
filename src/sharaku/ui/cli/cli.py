"""Command line interface for Sharaku."""

import sys
from typing import final

from sharaku.platform.logging import logger
from sharaku.shared.errors import SharakuError
from sharaku.ui.cli.args import ArgumentParser
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
from sharaku.ui.cli.commands import (
    BulkImportCommand,
    ImportCommand,
    PageCommand,
    RelocateCommand,
    ScanCommand,
    SettingsCommand,
    TemplateCommand,
    WorksCommand,
)


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)
            if not CommandProcessor._dispatch(args):
                sys.exit(1)

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except SharakuError as e:
            logger.error("%s", e)
            sys.exit(1)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)

    @staticmethod
    def _dispatch(args: CLIArgs) -> bool:
        match args:
            case SettingsArgs():
                return SettingsCommand(args).execute()
            case TemplateArgs():
                return TemplateCommand(args).execute()
            case ScanArgs():
                return ScanCommand(args).execute()
            case ImportArgs():
                return ImportCommand(args).execute()
            case BulkImportArgs():
                return BulkImportCommand(args).execute()
            case RelocateArgs():
                return RelocateCommand(args).execute()
            case WorksArgs():
                return WorksCommand(args).execute()
            case PageArgs():
                return PageCommand(args).execute()


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit(...)`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0

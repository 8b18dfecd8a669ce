"""Display management for CLI interface."""

from sharaku.ui.cli.display.progress import ProgressDisplay
from sharaku.ui.cli.display.result import ResultDisplay

__all__ = ["ProgressDisplay", "ResultDisplay"]

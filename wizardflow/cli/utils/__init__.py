"""CLI utilities package.

This package provides utilities for CLI commands including:
- CLIContext: Context management for commands
- CliPrinter: Console formatting for steps, errors and notifications
"""

from wizardflow.cli.utils.context import EXIT_LOAD_ERROR, CLIContext, configure_logging
from wizardflow.cli.utils.printer import FIELD_LABELS, CliPrinter

__all__ = [
    "CLIContext",
    "CliPrinter",
    "EXIT_LOAD_ERROR",
    "FIELD_LABELS",
    "configure_logging",
]

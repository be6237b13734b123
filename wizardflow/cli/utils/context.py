"""
CLI Context for WizardFlow.

Provides configuration loading, logging setup and answers-file loading for all
CLI commands.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from wizardflow.cli.utils.printer import CliPrinter
from wizardflow.common.exceptions import ConfigurationError, LoadError
from wizardflow.config import WizardConfig
from wizardflow.loader import load_form_data
from wizardflow.models import FormData

# Exit code for unreadable answers or configuration files
EXIT_LOAD_ERROR = 2


def configure_logging(level: str | int, console: Console | None = None) -> None:
    """Route log records through rich at the given level."""
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )


@dataclass
class CLIContext:
    """
    Context object for CLI commands.

    This context is created once and passed to all commands via Typer's
    context injection. It centralizes:
    - Configuration loading (file or environment)
    - Answers-file loading
    - Error handling and reporting
    - Console output management
    - Verbose mode control
    - JSON mode control (suppresses all non-JSON output)

    Attributes:
        console: Rich console for output
        verbose: Enable verbose output (ignored when json_mode is True)
        config_path: Optional configuration file
        printer: CLI printer for formatted output (always initialized)
        config: Loaded configuration (set by load_config_or_exit)
        json_mode: When True, suppress all non-JSON output (set by commands)
    """

    console: Console
    verbose: bool = False
    config_path: Path | None = None
    printer: CliPrinter = field(init=False)
    config: WizardConfig | None = None
    json_mode: bool = False

    def __post_init__(self):
        self.printer = CliPrinter(console=self.console, verbose=self.verbose)

    def set_json_mode(self, json_mode: bool) -> None:
        self.json_mode = json_mode
        self.printer.json_mode = json_mode

    def _should_print_verbose(self) -> bool:
        return self.verbose and not self.json_mode

    def print_verbose(self, message: str, **kwargs) -> None:
        """
        Print a message only if verbose mode is enabled and not in JSON mode.

        Args:
            message: Message to print
            **kwargs: Additional arguments passed to console.print()
        """
        if self._should_print_verbose():
            self.console.print(message, **kwargs)

    def print_progress(self, message: str) -> None:
        if self._should_print_verbose():
            self.printer.show_progress(message)

    def print_error(self, message: str) -> None:
        """
        Print an error message.

        In JSON mode the error is emitted as a JSON object instead.
        """
        if self.json_mode:
            self.printer.print_json({"error": message})
        else:
            self.printer.print_error(message)

    def print_json(self, data: Any) -> None:
        self.printer.print_json(data=data)

    def load_config_or_exit(self) -> WizardConfig:
        """
        Load configuration from --config or the environment and set up logging.

        Raises:
            typer.Exit: If the configuration is invalid
        """
        try:
            if self.config_path is not None:
                self.config = WizardConfig.from_file(self.config_path)
            else:
                self.config = WizardConfig.from_env()
        except ConfigurationError as e:
            self.print_error(str(e))
            raise typer.Exit(code=EXIT_LOAD_ERROR) from e

        configure_logging(logging.DEBUG if self.verbose else self.config.log_level)
        return self.config

    def load_answers_or_exit(self, answers_path: Path) -> FormData:
        """
        Load an answers file and exit on failure.

        Raises:
            typer.Exit: If the file cannot be loaded
        """
        self.print_verbose(f"[dim]Loading answers from: {answers_path}[/dim]")
        try:
            data = load_form_data(answers_path)
        except LoadError as e:
            if self.json_mode:
                self.print_json({"error": str(e), "details": e.errors})
            else:
                self.printer.print_error(str(e))
                for detail in e.errors:
                    self.console.print(f"  • {escape(detail)}")
            raise typer.Exit(code=EXIT_LOAD_ERROR) from e
        self.print_verbose("[green]✓ Answers loaded successfully[/green]")
        return data

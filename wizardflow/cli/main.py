"""WizardFlow CLI - Typer-based command line interface."""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from wizardflow.cli.commands import check_command, run_command, steps_command
from wizardflow.cli.utils import CLIContext

# Create main app and console
app = typer.Typer(
    name="wizardflow",
    help="WizardFlow: a step-gated onboarding wizard",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable verbose output")
    ] = False,
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Configuration file (YAML or JSON)"),
    ] = None,
):
    """
    WizardFlow CLI callback - sets up context for all commands.

    Commands access the shared CLIContext via ctx.obj, which provides:
    - Configuration loading and logging setup
    - Answers-file loading
    - Console output management
    - Verbose mode control
    """
    ctx.obj = CLIContext(console=console, verbose=verbose, config_path=config)


app.command(name="check")(check_command)
app.command(name="run")(run_command)
app.command(name="steps")(steps_command)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()

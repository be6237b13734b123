"""CLI commands module for WizardFlow."""

from wizardflow.cli.commands.check import check_command
from wizardflow.cli.commands.run import run_command
from wizardflow.cli.commands.steps import steps_command

__all__ = [
    "check_command",
    "run_command",
    "steps_command",
]

"""WizardFlow command line interface."""

from wizardflow.cli.main import app, main

__all__ = ["app", "main"]

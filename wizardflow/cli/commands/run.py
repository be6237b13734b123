"""Run command: an interactive terminal presentation of the wizard."""

import asyncio
from enum import StrEnum
from pathlib import Path
from typing import Annotated

import click
import typer

from wizardflow.cli.commands.common import open_session
from wizardflow.cli.utils import FIELD_LABELS
from wizardflow.gate import fields_for_step
from wizardflow.models import FormField, Theme
from wizardflow.session import WizardSession
from wizardflow.state import LAST_STEP


class RunAction(StrEnum):
    """Commands accepted at the wizard prompt."""

    EDIT = "edit"
    NEXT = "next"
    BACK = "back"
    FINISH = "finish"
    CLOSE = "close"


def prompt_step_fields(session: WizardSession) -> None:
    """Prompt for every field shown on the current step."""
    shown = list(fields_for_step(session.current_step))
    if session.current_step == LAST_STEP:
        shown.append(FormField.NEWSLETTER)

    for form_field in shown:
        label = FIELD_LABELS[form_field]
        current = session.data.get(form_field)
        if form_field is FormField.THEME:
            choices = [Theme.LIGHT.value, Theme.DARK.value]
            value = typer.prompt(
                label,
                default=current.value or None,
                type=click.Choice(choices, case_sensitive=False),
            )
        elif form_field is FormField.NEWSLETTER:
            value = typer.confirm("Subscribe to the newsletter?", default=current)
        elif form_field is FormField.PASSWORD:
            value = typer.prompt(label, default=current, hide_input=True, show_default=False)
        else:
            value = typer.prompt(label, default=current, show_default=bool(current))
        session.update_field(form_field, value)


def default_action(session: WizardSession) -> RunAction:
    if session.errors or not session.is_dirty:
        return RunAction.EDIT
    return RunAction.FINISH if session.current_step == LAST_STEP else RunAction.NEXT


def run_command(
    ctx: typer.Context,
    answers: Annotated[
        Path | None,
        typer.Option("--answers", "-a", help="Answers file used to pre-fill the form"),
    ] = None,
    fail: Annotated[
        bool, typer.Option("--fail", help="Make the finalize operation report failure")
    ] = False,
):
    """
    Walk through the onboarding wizard interactively.

    At each step choose an action: edit the step's fields, go to the next or
    previous step, finish on the last step, or close the wizard. Closing a
    form that holds data asks for confirmation first.

    Exit codes: 0 when the wizard finished successfully, 1 when it was closed.
    """
    cli_ctx = ctx.obj
    config = cli_ctx.load_config_or_exit()
    data = cli_ctx.load_answers_or_exit(answers) if answers else None

    session = open_session(
        config,
        data,
        succeed=not fail,
        confirmer=lambda prompt: typer.confirm(prompt, default=False),
        notifier=cli_ctx.printer.print_notification,
    )

    while session.is_open:
        cli_ctx.printer.print_step(session.snapshot(), session.progress())
        action = RunAction(
            typer.prompt(
                "Action",
                default=default_action(session).value,
                type=click.Choice([action.value for action in RunAction]),
            )
        )

        if action is RunAction.EDIT:
            prompt_step_fields(session)
        elif action is RunAction.NEXT:
            if session.current_step == LAST_STEP:
                cli_ctx.printer.print("[dim]This is the last step; use 'finish' to complete setup.[/dim]")
                continue
            cli_ctx.printer.print_gate_result(session.go_to_next_step())
        elif action is RunAction.BACK:
            session.go_to_previous_step()
        elif action is RunAction.FINISH:
            if session.current_step != LAST_STEP:
                cli_ctx.printer.print("[dim]Finish is only available on the last step.[/dim]")
                continue
            cli_ctx.printer.print("Submitting...")
            outcome = asyncio.run(session.finish())
            if outcome.succeeded:
                return
        elif action is RunAction.CLOSE:
            if session.close_modal():
                cli_ctx.printer.print("Wizard closed.")
                raise typer.Exit(code=1)

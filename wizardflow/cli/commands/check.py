"""Check command for walking an answers file through the wizard."""

from pathlib import Path
from typing import Annotated

import typer

from wizardflow.cli.commands.common import open_session
from wizardflow.state import LAST_STEP


def check_command(
    ctx: typer.Context,
    answers: Annotated[
        Path, typer.Argument(help="Answers file (YAML or JSON)")
    ],
    json_output: Annotated[
        bool, typer.Option("--json", help="Output in JSON format")
    ] = False,
):
    """
    Check an answers file against every wizard step.

    The answers are walked forward exactly as a user pressing Next would, and
    the last step is validated as a submit would. The command stops at the
    first step with errors.

    Exit codes: 0 when every step passes, 1 when a step has errors, 2 when the
    answers or configuration cannot be loaded.
    """
    cli_ctx = ctx.obj
    cli_ctx.set_json_mode(json_output)

    config = cli_ctx.load_config_or_exit()
    data = cli_ctx.load_answers_or_exit(answers)
    session = open_session(config, data)

    passed = True
    while session.current_step < LAST_STEP:
        cli_ctx.print_progress(f"Validating step {session.current_step} ({session.step_title})")
        result = session.go_to_next_step()
        if not result.passed:
            passed = False
            break
    if passed:
        cli_ctx.print_progress(f"Validating step {LAST_STEP} ({session.step_title})")
        passed = session.validate_step(LAST_STEP)

    snapshot = session.snapshot()
    if json_output:
        payload = snapshot.to_dict()
        payload["passed"] = passed
        cli_ctx.print_json(payload)
    else:
        cli_ctx.printer.print_check_result(snapshot, passed)

    if not passed:
        raise typer.Exit(code=1)

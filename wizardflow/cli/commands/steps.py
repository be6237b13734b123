"""Steps command listing the wizard's steps."""

from typing import Annotated

import typer

from wizardflow.gate import STEPS


def steps_command(
    ctx: typer.Context,
    json_output: Annotated[
        bool, typer.Option("--json", help="Output in JSON format")
    ] = False,
):
    """Show the wizard steps and the fields each one validates."""
    cli_ctx = ctx.obj
    cli_ctx.set_json_mode(json_output)

    if json_output:
        cli_ctx.print_json(
            {
                "steps": [
                    {
                        "number": step.number,
                        "title": step.title,
                        "fields": [form_field.wire_name for form_field in step.fields],
                    }
                    for step in STEPS
                ]
            }
        )
    else:
        cli_ctx.printer.print_steps_table()

"""CLI Printer for consistent output formatting."""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from wizardflow.gate import STEPS, GateResult
from wizardflow.models import FormField, WizardSnapshot

FIELD_LABELS: dict[FormField, str] = {
    FormField.FULL_NAME: "Full Name",
    FormField.EMAIL: "Email Address",
    FormField.USERNAME: "Username",
    FormField.PASSWORD: "Password",
    FormField.THEME: "Theme",
    FormField.NEWSLETTER: "Newsletter",
}


class CliPrinter:
    """Centralized printer for CLI output.

    This class handles all printing operations for the CLI, ensuring consistent
    formatting across commands and proper handling of verbose/JSON modes.
    """

    def __init__(
        self, console: Console, verbose: bool = False, json_mode: bool = False
    ):
        """Initialize printer with console and mode settings.

        Args:
            console: Rich console for output
            verbose: Whether to show detailed output
            json_mode: Whether to output in JSON format (can be set later)
        """
        self.console = console
        self.verbose = verbose
        self.json_mode = json_mode

    def show_progress(self, message: str) -> None:
        if self.verbose:
            self.console.print(f"🔄 {message}")

    def show_success(self, message: str) -> None:
        self.console.print(f"✅ {message}")

    def print_json(self, data: dict) -> None:
        self.console.print_json(data=data)

    def print(self, message: str, **kwargs) -> None:
        self.console.print(message, **kwargs)

    def print_error(self, message: str) -> None:
        self.console.print(f"[red]❌ Error:[/red] {escape(message)}")

    def print_notification(self, message: str, success: bool) -> None:
        """Print the finish notification shown to the user."""
        if success:
            self.console.print(f"[green]🎉 {message}[/green]")
        else:
            self.console.print(f"[red]❌ {message}[/red]")

    def print_step_indicator(self, current_step: int, progress: float) -> None:
        """Print the step bar, marking completed steps with a check."""
        parts = []
        for step in STEPS:
            if step.number < current_step:
                parts.append(f"[green]✓ {step.title}[/green]")
            elif step.number == current_step:
                parts.append(f"[bold]{step.number} {step.title}[/bold]")
            else:
                parts.append(f"[dim]{step.number} {step.title}[/dim]")
        self.console.print("  →  ".join(parts))
        self.console.print(f"[dim]{current_step} of {len(STEPS)} ({progress:.0%})[/dim]")

    def print_errors(self, errors: dict[FormField, str]) -> None:
        for form_field, message in errors.items():
            self.console.print(f"  [red]• {FIELD_LABELS[form_field]}:[/red] {message}")

    def print_step(self, snapshot: WizardSnapshot, progress: float) -> None:
        """Print the current step with its fields and recorded errors."""
        self.console.print()
        self.print_step_indicator(snapshot.current_step, progress)
        step = STEPS[snapshot.current_step - 1]
        for form_field in step.fields:
            value = snapshot.data.get(form_field)
            if form_field is FormField.PASSWORD and value:
                value = "*" * len(value)
            elif value:
                value = escape(str(value))
            self.console.print(f"  {FIELD_LABELS[form_field]}: {value or '[dim]<empty>[/dim]'}")
        if snapshot.current_step == len(STEPS):
            newsletter = "yes" if snapshot.data.newsletter else "no"
            self.console.print(f"  {FIELD_LABELS[FormField.NEWSLETTER]}: {newsletter}")
        if snapshot.errors:
            self.print_errors(snapshot.errors)

    def print_gate_result(self, result: GateResult) -> None:
        if result.passed:
            self.show_progress(f"Step {result.step} passed")
        else:
            self.console.print(f"[yellow]⚠ Step {result.step} has errors:[/yellow]")
            self.print_errors(result.errors)

    def print_check_result(self, snapshot: WizardSnapshot, passed: bool) -> None:
        """Print the outcome of walking an answers file through the wizard."""
        step = STEPS[snapshot.current_step - 1]
        if passed:
            self.show_success(f"All {len(STEPS)} steps passed")
            return
        self.console.print(
            f"[yellow]⚠ Stopped at step {step.number} ({step.title}) "
            f"with {len(snapshot.errors)} error(s):[/yellow]"
        )
        self.print_errors(snapshot.errors)

    def print_steps_table(self) -> None:
        table = Table(title="Wizard steps")
        table.add_column("Step", justify="right")
        table.add_column("Title")
        table.add_column("Validated fields")
        for step in STEPS:
            table.add_row(
                str(step.number),
                step.title,
                ", ".join(form_field.wire_name for form_field in step.fields),
            )
        self.console.print(table)

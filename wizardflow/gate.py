"""Step gating and navigation logic for WizardFlow."""

import logging
from dataclasses import dataclass, field

from wizardflow.common.exceptions import InvalidStepError
from wizardflow.models import ErrorMap, FormField
from wizardflow.rules import FIELD_RULES, RuleResult
from wizardflow.state import FIRST_STEP, LAST_STEP, FormState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StepDefinition:
    """A wizard step and the fields it owns for validation."""

    number: int
    title: str
    fields: tuple[FormField, ...]


STEPS: tuple[StepDefinition, ...] = (
    StepDefinition(1, "Personal Info", (FormField.FULL_NAME, FormField.EMAIL)),
    StepDefinition(2, "Account Setup", (FormField.USERNAME, FormField.PASSWORD)),
    StepDefinition(3, "Preferences", (FormField.THEME,)),
)


def get_step(number: int) -> StepDefinition:
    """
    Look up a step by number.

    Raises:
        InvalidStepError: If the number is outside the wizard's steps
    """
    if isinstance(number, bool) or not isinstance(number, int) or not FIRST_STEP <= number <= LAST_STEP:
        raise InvalidStepError(number)
    return STEPS[number - 1]


def fields_for_step(number: int) -> tuple[FormField, ...]:
    return get_step(number).fields


def step_for_field(form_field: FormField) -> int | None:
    """Return the step that validates a field, or None if it is never validated."""
    for step in STEPS:
        if form_field in step.fields:
            return step.number
    return None


@dataclass(frozen=True)
class GateResult:
    """Result of validating a step against the current form data."""

    passed: bool
    step: int
    errors: dict[FormField, str] = field(default_factory=dict)
    results: list[RuleResult] = field(default_factory=list)

    @property
    def failed_fields(self) -> list[FormField]:
        return list(self.errors)


class StepGate:
    """
    Validates a step's fields and decides whether navigation may proceed.

    Forward motion is allowed only when every rule owned by the current step
    passes. Backward motion is unconditional.
    """

    def __init__(self, state: FormState):
        self.state = state

    def evaluate(self, step: int) -> GateResult:
        """
        Run the rules owned by ``step`` without touching the error map.

        Args:
            step: Step number to evaluate

        Returns:
            GateResult with an entry for each failing field only
        """
        results = [FIELD_RULES[form_field].validate(self.state.data) for form_field in fields_for_step(step)]
        errors: ErrorMap = {result.field: result.error_message for result in results if not result.success}
        return GateResult(passed=not errors, step=step, errors=errors, results=results)

    def validate_step(self, step: int) -> bool:
        """
        Validate ``step`` and replace the live error map with its failures.

        Errors recorded for other steps are discarded, not merged.

        Returns:
            True if the step has no failing fields
        """
        with self.state.lock:
            result = self.evaluate(step)
            self.state.replace_errors(result.errors)
        return result.passed

    def go_to_next_step(self) -> GateResult:
        """Advance one step if the current step validates, clamped to the last step."""
        with self.state.lock:
            current = self.state.current_step
            result = self.evaluate(current)
            self.state.replace_errors(result.errors)
            if result.passed:
                self.state.current_step = min(current + 1, LAST_STEP)
                logger.debug("Advanced from step %d to step %d", current, self.state.current_step)
            else:
                logger.debug("Step %d blocked by %s", current, ", ".join(f.value for f in result.errors))
        return result

    def go_to_previous_step(self) -> int:
        """Go back one step, clamped to the first, and clear every recorded error."""
        with self.state.lock:
            self.state.current_step = max(self.state.current_step - 1, FIRST_STEP)
            self.state.clear_errors()
            logger.debug("Moved back to step %d", self.state.current_step)
            return self.state.current_step

    def progress(self) -> float:
        """Fraction of the wizard reached, from 1/3 on the first step to 1.0."""
        return self.state.current_step / len(STEPS)

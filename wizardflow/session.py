"""
WizardSession: the presentation-facing entry point of WizardFlow.

A session owns one FormState and wires the step gate, the submission
controller and the lifecycle manager around it. Presentation layers read
state through the session's properties or ``snapshot()`` and call the
navigation and lifecycle methods in response to user events.

Example Usage:
    ```python
    import asyncio
    from wizardflow import WizardSession

    session = WizardSession()
    session.open_modal()
    session.update_field("fullName", "Jo")
    session.update_field("email", "jo@example.com")
    session.go_to_next_step()
    ...
    outcome = asyncio.run(session.finish())
    ```
"""

import logging
from collections.abc import Callable
from typing import Any

from wizardflow.config import WizardConfig
from wizardflow.gate import GateResult, StepGate, get_step
from wizardflow.lifecycle import Confirmer, LifecycleManager, always_confirm
from wizardflow.models import ErrorMap, FormData, FormField, SubmissionStatus, Theme, WizardSnapshot
from wizardflow.state import FormState
from wizardflow.submission import DelayedFinalizer, Finalizer, SubmissionController, SubmissionOutcome

logger = logging.getLogger(__name__)

# Capability reporting the finish result to the user.
Notifier = Callable[[str, bool], None]


def log_notifier(message: str, success: bool) -> None:
    """Notifier that writes the message to the session logger."""
    logger.log(logging.INFO if success else logging.ERROR, message)


class WizardSession:
    """
    One open instance of the onboarding wizard.

    Attributes:
        state: The live form state
        gate: Step validation and navigation
        submission: Finalize-call driver
        lifecycle: Open/reset/close orchestration
    """

    def __init__(
        self,
        finalizer: Finalizer | None = None,
        confirmer: Confirmer = always_confirm,
        notifier: Notifier = log_notifier,
        config: WizardConfig | None = None,
    ):
        """
        Initialize the session.

        Args:
            finalizer: Async finalize capability. Defaults to a DelayedFinalizer
                      using the configured delay.
            confirmer: Prompt used before discarding a dirty form
            notifier: Receives the success or failure message from ``finish``
            config: Session configuration. Defaults to WizardConfig().
        """
        self.config = config if config is not None else WizardConfig()
        self.state = FormState()
        self.gate = StepGate(self.state)
        self.submission = SubmissionController(
            self.state,
            finalizer if finalizer is not None else DelayedFinalizer(self.config.finalize_delay),
            gate=self.gate,
        )
        self.lifecycle = LifecycleManager(self.state, confirmer, self.config.confirm_prompt)
        self.notifier = notifier

    # Read access

    @property
    def data(self) -> FormData:
        return self.state.data

    @property
    def errors(self) -> ErrorMap:
        """Recorded errors keyed by FormField; see error_for to look up by name."""
        return self.state.errors

    def error_for(self, name: "str | FormField") -> str | None:
        return self.state.error_for(name)

    @property
    def current_step(self) -> int:
        return self.state.current_step

    @property
    def status(self) -> SubmissionStatus:
        return self.state.status

    @property
    def is_open(self) -> bool:
        return self.lifecycle.is_open

    @property
    def is_dirty(self) -> bool:
        return self.state.is_dirty

    @property
    def is_dark_mode(self) -> bool:
        return self.state.data.theme is Theme.DARK

    @property
    def step_title(self) -> str:
        return get_step(self.state.current_step).title

    def snapshot(self) -> WizardSnapshot:
        return self.state.snapshot()

    # Field editing and navigation

    def update_field(self, name: "str | FormField", value: Any) -> None:
        self.state.update_field(name, value)

    def validate_step(self, step: int) -> bool:
        return self.gate.validate_step(step)

    def go_to_next_step(self) -> GateResult:
        return self.gate.go_to_next_step()

    def go_to_previous_step(self) -> int:
        return self.gate.go_to_previous_step()

    def progress(self) -> float:
        return self.gate.progress()

    # Lifecycle

    def open_modal(self) -> None:
        self.lifecycle.open_modal()

    def close_modal(self) -> bool:
        return self.lifecycle.close_modal()

    def reset_form(self) -> None:
        self.lifecycle.reset_form()

    # Submission

    async def submit(self) -> bool:
        return await self.submission.submit()

    async def finish(self) -> SubmissionOutcome:
        """
        Submit the wizard and report the result.

        On success the user is notified, the session is hidden and the form
        is reset. On failure the user is notified and every value is kept so
        they can try again.
        """
        outcome = await self.submission.submit_with_outcome()
        if outcome.succeeded:
            self.notifier(self.config.success_message, True)
            with self.state.lock:
                self.state.visible = False
                self.lifecycle.reset_form()
        else:
            self.notifier(self.config.failure_message, False)
        return outcome

"""Submission lifecycle for the wizard's finalize operation."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from wizardflow.constants import DEFAULT_FINALIZE_DELAY
from wizardflow.gate import StepGate
from wizardflow.models import FormData, SubmissionStatus
from wizardflow.state import LAST_STEP, FormState

logger = logging.getLogger(__name__)

# Async capability completing the wizard; returns True on success.
Finalizer = Callable[[FormData], Awaitable[bool]]


class DelayedFinalizer:
    """
    Finalizer that waits for a fixed delay and then reports an outcome.

    Stands in for a real account-creation call.
    """

    def __init__(self, delay: float = DEFAULT_FINALIZE_DELAY, succeed: bool = True):
        self.delay = delay
        self.succeed = succeed

    async def __call__(self, data: FormData) -> bool:
        await asyncio.sleep(self.delay)
        return self.succeed


@dataclass(frozen=True)
class SubmissionOutcome:
    """
    Transient result of one submit attempt.

    Attributes:
        status: SUCCEEDED or FAILED
        message: Short description of what happened
        error: Exception raised by the finalizer, if any
        attempted: Whether the finalizer was invoked
    """

    status: SubmissionStatus
    message: str = ""
    error: Exception | None = None
    attempted: bool = False

    @property
    def succeeded(self) -> bool:
        return self.status is SubmissionStatus.SUCCEEDED


class SubmissionController:
    """
    Drives the single finalize call at the last step.

    Each submit validates the last step, then makes one best-effort call to
    the finalizer. There are no retries, timeouts or cancellation; status is
    back to IDLE whenever a submit returns.
    """

    def __init__(self, state: FormState, finalizer: Finalizer, gate: StepGate | None = None):
        self.state = state
        self.finalizer = finalizer
        self.gate = gate if gate is not None else StepGate(state)

    async def submit(self) -> bool:
        """Validate the last step and finalize; True only if finalizing succeeded."""
        outcome = await self.submit_with_outcome()
        return outcome.succeeded

    async def submit_with_outcome(self) -> SubmissionOutcome:
        """
        Same as ``submit`` but reports why a submission failed.

        Returns:
            SubmissionOutcome with the finalizer's exception when it raised
        """
        with self.state.lock:
            if self.state.is_submitting:
                logger.warning("Submit ignored: a submission is already in progress")
                return SubmissionOutcome(
                    status=SubmissionStatus.FAILED,
                    message="Submission already in progress",
                )
            if not self.gate.validate_step(LAST_STEP):
                return SubmissionOutcome(
                    status=SubmissionStatus.FAILED,
                    message=f"Step {LAST_STEP} has invalid fields",
                )
            self.state.set_status(SubmissionStatus.SUBMITTING)
            data = self.state.data.copy()

        try:
            succeeded = await self.finalizer(data)
        except Exception as e:
            logger.exception("Finalize operation failed")
            return SubmissionOutcome(
                status=SubmissionStatus.FAILED,
                message=f"Finalize operation raised {type(e).__name__}: {e}",
                error=e,
                attempted=True,
            )
        finally:
            self.state.set_status(SubmissionStatus.IDLE)

        if not succeeded:
            logger.warning("Finalize operation reported failure")
            return SubmissionOutcome(
                status=SubmissionStatus.FAILED,
                message="Finalize operation reported failure",
                attempted=True,
            )
        logger.info("Finalize operation succeeded")
        return SubmissionOutcome(
            status=SubmissionStatus.SUCCEEDED,
            message="Finalize operation succeeded",
            attempted=True,
        )

"""Open, reset and close orchestration for a wizard session."""

import logging
from collections.abc import Callable

from wizardflow.constants import DEFAULT_CONFIRM_PROMPT
from wizardflow.state import FormState

logger = logging.getLogger(__name__)

# Capability asking the user to accept or decline a prompt.
Confirmer = Callable[[str], bool]


def always_confirm(prompt: str) -> bool:
    """Confirmer that accepts every prompt."""
    return True


class LifecycleManager:
    """
    Opens, resets and closes a wizard session.

    Closing a dirty form asks the confirmer first; a declined prompt leaves
    the session exactly as it was.
    """

    def __init__(
        self,
        state: FormState,
        confirmer: Confirmer = always_confirm,
        confirm_prompt: str = DEFAULT_CONFIRM_PROMPT,
    ):
        self.state = state
        self.confirmer = confirmer
        self.confirm_prompt = confirm_prompt

    @property
    def is_open(self) -> bool:
        return self.state.visible

    def open_modal(self) -> None:
        """Start a fresh session and make it visible.

        Ignored while a submission is in flight.
        """
        with self.state.lock:
            if self.state.is_submitting:
                logger.warning("Open ignored: a submission is in progress")
                return
            self.state.reset()
            self.state.visible = True
        logger.debug("Wizard opened")

    def reset_form(self) -> None:
        """Restore every field, the error map, the step and the status.

        Ignored while a submission is in flight.
        """
        with self.state.lock:
            if self.state.is_submitting:
                logger.warning("Reset ignored: a submission is in progress")
                return
            self.state.reset()

    def close_modal(self) -> bool:
        """
        Close the session, confirming first if the form is dirty.

        A close requested while a submission is in flight is refused.

        Returns:
            True if the session was closed, False if the close was aborted
        """
        if self.state.is_submitting:
            logger.warning("Close ignored: a submission is in progress")
            return False
        if self.state.is_dirty and not self.confirmer(self.confirm_prompt):
            logger.debug("Close declined by user")
            return False
        with self.state.lock:
            self.state.visible = False
            self.reset_form()
        logger.debug("Wizard closed")
        return True

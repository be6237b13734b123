"""Mutable form state for a single wizard session."""

import logging
import threading
from typing import Any

from wizardflow.common.exceptions import FieldValueError, UnknownFieldError
from wizardflow.models import (
    ErrorMap,
    FormData,
    FormField,
    SubmissionStatus,
    Theme,
    WizardSnapshot,
)

logger = logging.getLogger(__name__)

FIRST_STEP = 1
LAST_STEP = 3


def resolve_field(name: "str | FormField") -> FormField:
    """Resolve a field name, raising UnknownFieldError for foreign names."""
    try:
        return FormField.parse(name)
    except ValueError as e:
        raise UnknownFieldError(str(name)) from e


class FormState:
    """
    The live record of one wizard session.

    Holds the collected values, the error map, the current step, the
    submission status and whether the session is visible. Mutations are made
    while holding ``lock`` so a multi-threaded host sees each operation as a
    whole.
    """

    def __init__(self) -> None:
        self.data = FormData()
        self.errors: ErrorMap = {}
        self.current_step: int = FIRST_STEP
        self.status = SubmissionStatus.IDLE
        self.visible = False
        self.lock = threading.RLock()

    def get_field(self, name: "str | FormField") -> Any:
        """Return the raw value of a field."""
        return self.data.get(resolve_field(name))

    def update_field(self, name: "str | FormField", value: Any) -> None:
        """
        Store a raw value and drop that field's recorded error, if any.

        The value is not re-validated: it may still be invalid after the edit,
        and its error only comes back at the next step validation.

        Args:
            name: Field member, attribute name or wire name
            value: New raw value

        Raises:
            UnknownFieldError: If the name is not a form field
            FieldValueError: If a theme value names no theme
        """
        form_field = resolve_field(name)
        if form_field is FormField.THEME:
            try:
                value = Theme.coerce(value)
            except ValueError as e:
                raise FieldValueError(str(e), field_name=form_field.value, value=value) from e

        with self.lock:
            self.data.set(form_field, value)
            self.errors.pop(form_field, None)

    def error_for(self, name: "str | FormField") -> str | None:
        """Return the recorded error for a field given by any of its names."""
        return self.errors.get(resolve_field(name))

    def replace_errors(self, errors: ErrorMap) -> None:
        """Overwrite the error map with a fresh one."""
        with self.lock:
            self.errors = dict(errors)

    def clear_errors(self) -> None:
        with self.lock:
            self.errors = {}

    def set_status(self, status: SubmissionStatus) -> None:
        with self.lock:
            logger.debug("Submission status %s -> %s", self.status.value, status.value)
            self.status = status

    @property
    def is_dirty(self) -> bool:
        """True when any field holds a non-initial value."""
        return self.data.is_dirty

    @property
    def is_submitting(self) -> bool:
        return self.status is SubmissionStatus.SUBMITTING

    def reset(self) -> None:
        """Restore data, errors, step and status to their initial values."""
        with self.lock:
            self.data.clear()
            self.errors = {}
            self.current_step = FIRST_STEP
            self.status = SubmissionStatus.IDLE

    def snapshot(self) -> WizardSnapshot:
        """Return a read-only copy of the current state."""
        with self.lock:
            return WizardSnapshot(
                data=self.data.copy(),
                errors=dict(self.errors),
                current_step=self.current_step,
                status=self.status,
                visible=self.visible,
            )

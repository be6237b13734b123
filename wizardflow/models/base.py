"""
Base model definitions for WizardFlow.

This module is the single source of truth for the wizard's data structures:
the collected form data, the error map and the read-only snapshot handed to
presentation layers.
"""

from dataclasses import dataclass, field, fields, replace
from typing import Any, TypedDict

from .enums import FormField, SubmissionStatus, Theme

__all__ = [
    "ErrorMap",
    "FormData",
    "FormDataDict",
    "WizardSnapshot",
    "WizardSnapshotDict",
]

# Field -> message. A key is present only while its rule reports a failure.
ErrorMap = dict[FormField, str]


class FormDataDict(TypedDict, total=False):
    """Wire representation of form data (camelCase keys)."""

    fullName: str
    email: str
    username: str
    password: str
    theme: str
    newsletter: bool


class WizardSnapshotDict(TypedDict):
    """Wire representation of a wizard snapshot."""

    data: FormDataDict
    errors: dict[str, str]
    current_step: int
    status: str
    visible: bool


@dataclass
class FormData:
    """Values collected by the wizard, one live instance per session."""

    full_name: str = ""
    email: str = ""
    username: str = ""
    password: str = ""
    theme: Theme = Theme.NONE
    newsletter: bool = False

    def get(self, form_field: FormField) -> Any:
        """Return the raw value stored for a field."""
        return getattr(self, form_field.value)

    def set(self, form_field: FormField, value: Any) -> None:
        """Store a raw value for a field without any validation."""
        setattr(self, form_field.value, value)

    def copy(self) -> "FormData":
        """Return a detached copy of the current values."""
        return replace(self)

    def clear(self) -> None:
        """Restore every field to its initial value."""
        for data_field in fields(self):
            setattr(self, data_field.name, data_field.default)

    @property
    def is_dirty(self) -> bool:
        """True when any field holds a non-initial value.

        Strings (theme included) count only when they contain something other
        than whitespace; other values count when truthy.
        """
        for form_field in FormField:
            value = self.get(form_field)
            if isinstance(value, str):
                if value.strip():
                    return True
            elif value:
                return True
        return False

    def to_dict(self, include_password: bool = True) -> FormDataDict:
        """Convert to a JSON-serializable dict keyed by wire names."""
        result: dict[str, Any] = {}
        for form_field in FormField:
            value = self.get(form_field)
            if form_field is FormField.PASSWORD and not include_password:
                value = "*" * len(value) if value else ""
            if isinstance(value, Theme):
                value = value.value
            result[form_field.wire_name] = value
        return result  # type: ignore[return-value]


@dataclass(frozen=True)
class WizardSnapshot:
    """Read-only view of a wizard session at one point in time."""

    data: FormData
    errors: dict[FormField, str] = field(default_factory=dict)
    current_step: int = 1
    status: SubmissionStatus = SubmissionStatus.IDLE
    visible: bool = False

    def to_dict(self, include_password: bool = False) -> WizardSnapshotDict:
        """Convert snapshot to a JSON-serializable dictionary."""
        return {
            "data": self.data.to_dict(include_password=include_password),
            "errors": {form_field.wire_name: message for form_field, message in self.errors.items()},
            "current_step": self.current_step,
            "status": self.status.value,
            "visible": self.visible,
        }

"""
Enums and constants for the WizardFlow data model.

This module defines all enums used by the wizard core to avoid magic strings
throughout the codebase.

Usage:
    from wizardflow.models.enums import (
        FormField,
        SubmissionStatus,
        Theme,
    )
"""

from enum import StrEnum

# ============================================================================
# Form Field Enums
# ============================================================================


class FormField(StrEnum):
    """Fields collected by the wizard.

    Values are the Python attribute names on FormData. Every member also has a
    camelCase wire name used in answers files and JSON output.
    """

    FULL_NAME = "full_name"
    EMAIL = "email"
    USERNAME = "username"
    PASSWORD = "password"
    THEME = "theme"
    NEWSLETTER = "newsletter"

    @property
    def wire_name(self) -> str:
        """camelCase name of the field (e.g. ``fullName``)."""
        head, *rest = self.value.split("_")
        return head + "".join(part.capitalize() for part in rest)

    @classmethod
    def parse(cls, name: "str | FormField") -> "FormField":
        """Resolve a field from its member, attribute name or wire name.

        Raises:
            ValueError: If the name matches no field
        """
        if isinstance(name, cls):
            return name
        for member in cls:
            if name in (member.value, member.wire_name):
                return member
        raise ValueError(f"'{name}' is not a form field")


# ============================================================================
# Preference Enums
# ============================================================================


class Theme(StrEnum):
    """Display theme chosen on the preferences step."""

    NONE = ""
    LIGHT = "Light"
    DARK = "Dark"

    @classmethod
    def coerce(cls, value: "str | Theme | None") -> "Theme":
        """Convert a raw value into a Theme.

        ``None`` and blank strings map to ``NONE``; names and values match
        case-insensitively.

        Raises:
            ValueError: If the value names no theme
        """
        if value is None:
            return cls.NONE
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"{value!r} is not a theme")
        text = value.strip().lower()
        for member in cls:
            if text in (member.value.lower(), member.name.lower()):
                return member
        raise ValueError(f"'{value}' is not a theme")


# ============================================================================
# Submission Enums
# ============================================================================


class SubmissionStatus(StrEnum):
    """Status of the finalize operation.

    Form state only ever holds IDLE or SUBMITTING; SUCCEEDED and FAILED are
    reported to the caller through a submission outcome.
    """

    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"

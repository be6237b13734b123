"""Field validation rules for WizardFlow.

Each ``validate_*`` function is a pure predicate over one raw field value: it
returns the failure message, or ``None`` when the value passes. ``FieldRule``
binds a predicate to the field it guards so step gates can evaluate form data
the same way for every field.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from wizardflow.models import FormData, FormField, Theme

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
USERNAME_PATTERN = re.compile(r"[a-zA-Z0-9_]+")

MIN_FULL_NAME_LENGTH = 2
MIN_USERNAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 6

RuleCheck = Callable[[Any], str | None]


def validate_full_name(name: str) -> str | None:
    if not name.strip():
        return "Full name is required"
    if len(name.strip()) < MIN_FULL_NAME_LENGTH:
        return "Name must be at least 2 characters"
    return None


def validate_email(email: str) -> str | None:
    if not email.strip():
        return "Email is required"
    if not EMAIL_PATTERN.fullmatch(email):
        return "Please enter a valid email address"
    return None


def validate_username(username: str) -> str | None:
    """Check username presence, raw length and character set.

    Length is measured on the raw value, so surrounding whitespace counts
    toward the minimum but then fails the character check.
    """
    if not username.strip():
        return "Username is required"
    if len(username) < MIN_USERNAME_LENGTH:
        return "Username must be at least 3 characters"
    if not USERNAME_PATTERN.fullmatch(username):
        return "Username can only contain letters, numbers, and underscores"
    return None


def validate_password(password: str) -> str | None:
    if not password.strip():
        return "Password is required"
    if len(password) < MIN_PASSWORD_LENGTH:
        return "Password must be at least 6 characters"
    return None


def validate_theme(theme: Theme | str | None) -> str | None:
    if not theme:
        return "Please select a theme"
    return None


@dataclass(frozen=True)
class RuleResult:
    """
    Result of evaluating one field rule.

    Attributes:
        success: Whether the value passed
        field: Field that was validated
        value: Raw value that was checked
        error_message: Failure message, empty on success
    """

    success: bool
    field: FormField
    value: Any = None
    error_message: str = ""


@dataclass(frozen=True)
class FieldRule:
    """Validation rule guarding a single form field."""

    field: FormField
    check: RuleCheck

    def validate(self, data: FormData) -> RuleResult:
        """
        Validate the field's current value in ``data``.

        Args:
            data: Form data to read the value from

        Returns:
            RuleResult describing the outcome
        """
        value = data.get(self.field)
        message = self.check(value)
        return RuleResult(
            success=message is None,
            field=self.field,
            value=value,
            error_message=message or "",
        )


# Newsletter has no rule; it is always valid.
FIELD_RULES: dict[FormField, FieldRule] = {
    rule.field: rule
    for rule in (
        FieldRule(FormField.FULL_NAME, validate_full_name),
        FieldRule(FormField.EMAIL, validate_email),
        FieldRule(FormField.USERNAME, validate_username),
        FieldRule(FormField.PASSWORD, validate_password),
        FieldRule(FormField.THEME, validate_theme),
    )
}


def get_rule(form_field: FormField) -> FieldRule | None:
    """Return the rule guarding a field, or None for unvalidated fields."""
    return FIELD_RULES.get(form_field)

"""Common exceptions for WizardFlow.

This module defines the exception types raised by the wizard core and its
loaders. Field validation failures are never raised: they are reported as
data through the session's error map.
"""

from typing import Any


class WizardFlowError(Exception):
    """Base exception for all WizardFlow-related errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        """Initialize exception with message and optional context."""
        super().__init__(message)
        self.context = context or {}


class UnknownFieldError(WizardFlowError):
    """Raised when a field name does not belong to the form."""

    def __init__(self, field_name: str, context: dict[str, Any] | None = None):
        """Initialize unknown field error."""
        super().__init__(f"Unknown form field: '{field_name}'", context)
        self.field_name = field_name


class FieldValueError(WizardFlowError):
    """Raised when a value cannot be stored in a field at all."""

    def __init__(
        self,
        message: str,
        field_name: str | None = None,
        value: Any | None = None,
        context: dict[str, Any] | None = None
    ):
        """Initialize field value error with details."""
        super().__init__(message, context)
        self.field_name = field_name
        self.value = value


class InvalidStepError(WizardFlowError):
    """Raised when a step number falls outside the wizard's steps."""

    def __init__(self, step: Any, context: dict[str, Any] | None = None):
        """Initialize invalid step error."""
        super().__init__(f"Invalid wizard step: {step!r}", context)
        self.step = step


class ConfigurationError(WizardFlowError):
    """Raised when configuration is invalid."""

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        context: dict[str, Any] | None = None
    ):
        """Initialize configuration error with details."""
        super().__init__(message, context)
        self.config_key = config_key


class LoadError(WizardFlowError):
    """Raised when an answers file cannot be loaded."""

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        errors: list[str] | None = None,
        context: dict[str, Any] | None = None
    ):
        """Initialize loader error with details."""
        super().__init__(message, context)
        self.file_path = file_path
        self.errors = errors or []


__all__ = [
    'WizardFlowError',
    'UnknownFieldError',
    'FieldValueError',
    'InvalidStepError',
    'ConfigurationError',
    'LoadError',
]

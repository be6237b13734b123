"""Common utilities and shared components for WizardFlow.

This package contains the exception hierarchy used throughout the
WizardFlow core, loader and CLI.
"""

from .exceptions import (
    ConfigurationError,
    FieldValueError,
    InvalidStepError,
    LoadError,
    UnknownFieldError,
    WizardFlowError,
)

__all__ = [
    "WizardFlowError",
    "UnknownFieldError",
    "FieldValueError",
    "InvalidStepError",
    "ConfigurationError",
    "LoadError",
]

"""
WizardFlow models package.

This package is the single source of truth for the enums and data structures
used throughout WizardFlow.

Usage:
    from wizardflow.models import (
        FormData,
        FormField,
        SubmissionStatus,
        Theme,
    )
"""

from .base import (
    ErrorMap,
    FormData,
    FormDataDict,
    WizardSnapshot,
    WizardSnapshotDict,
)
from .enums import (
    FormField,
    SubmissionStatus,
    Theme,
)

__all__ = [
    # Enumerations
    "FormField",
    "SubmissionStatus",
    "Theme",
    # Data structures
    "ErrorMap",
    "FormData",
    "FormDataDict",
    "WizardSnapshot",
    "WizardSnapshotDict",
]

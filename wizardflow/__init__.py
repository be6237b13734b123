"""
WizardFlow: a step-gated, multi-step data-collection wizard.

WizardFlow collects a fixed set of onboarding fields across three sequential
steps. Each step's fields must validate before the wizard moves forward;
moving back is always allowed. The last step performs a single asynchronous
finalize operation.

Core Components:
    - ValidationRules: Pure per-field predicates (wizardflow.rules)
    - FormState: The mutable record of one session
    - StepGate: Step validation and navigation
    - SubmissionController: The single async finalize call
    - LifecycleManager: Open/reset/close with confirmation
    - WizardSession: Presentation-facing facade over all of the above

Example Usage:
    ```python
    import asyncio
    from wizardflow import WizardSession

    session = WizardSession()
    session.open_modal()
    session.update_field("fullName", "Jo")
    session.update_field("email", "jo@example.com")
    result = session.go_to_next_step()
    print(f"Step: {session.current_step}, errors: {result.errors}")
    ```
"""

__version__ = "0.1.0"

# Public API exports - Core functionality
from .common.exceptions import (
    ConfigurationError,
    FieldValueError,
    InvalidStepError,
    LoadError,
    UnknownFieldError,
    WizardFlowError,
)
from .config import WizardConfig
from .gate import STEPS, GateResult, StepDefinition, StepGate
from .lifecycle import Confirmer, LifecycleManager, always_confirm
from .loader import load_form_data, parse_form_data
from .models import ErrorMap, FormData, FormField, SubmissionStatus, Theme, WizardSnapshot
from .rules import (
    FIELD_RULES,
    FieldRule,
    RuleResult,
    validate_email,
    validate_full_name,
    validate_password,
    validate_theme,
    validate_username,
)
from .session import Notifier, WizardSession
from .state import FormState
from .submission import DelayedFinalizer, Finalizer, SubmissionController, SubmissionOutcome

__all__ = [
    # Core functionality
    "WizardSession",
    "FormState",
    "StepGate",
    "SubmissionController",
    "LifecycleManager",
    "WizardConfig",
    "__version__",
    # Data types and results
    "FormData",
    "FormField",
    "Theme",
    "SubmissionStatus",
    "ErrorMap",
    "WizardSnapshot",
    "GateResult",
    "StepDefinition",
    "STEPS",
    "SubmissionOutcome",
    "RuleResult",
    "FieldRule",
    "FIELD_RULES",
    # Capabilities
    "Finalizer",
    "DelayedFinalizer",
    "Confirmer",
    "always_confirm",
    "Notifier",
    # Validation rules
    "validate_full_name",
    "validate_email",
    "validate_username",
    "validate_password",
    "validate_theme",
    # Utilities
    "load_form_data",
    "parse_form_data",
    # Exceptions
    "WizardFlowError",
    "UnknownFieldError",
    "FieldValueError",
    "InvalidStepError",
    "ConfigurationError",
    "LoadError",
]

"""Shared helpers for CLI commands."""

from wizardflow.config import WizardConfig
from wizardflow.lifecycle import Confirmer, always_confirm
from wizardflow.models import FormData, FormField
from wizardflow.session import Notifier, WizardSession, log_notifier
from wizardflow.submission import DelayedFinalizer


def open_session(
    config: WizardConfig,
    answers: FormData | None = None,
    succeed: bool = True,
    confirmer: Confirmer = always_confirm,
    notifier: Notifier = log_notifier,
) -> WizardSession:
    """Open a session and pre-fill it from answers, field by field."""
    session = WizardSession(
        finalizer=DelayedFinalizer(config.finalize_delay, succeed=succeed),
        confirmer=confirmer,
        notifier=notifier,
        config=config,
    )
    session.open_modal()
    if answers is not None:
        for form_field in FormField:
            session.update_field(form_field, answers.get(form_field))
    return session

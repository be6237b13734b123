"""Integration tests for wizardflow.session.WizardSession.

These walk complete wizard sessions the way a presentation layer drives
them.
"""

import asyncio

import pytest

from tests.helpers import RecordingFinalizer
from wizardflow.config import WizardConfig
from wizardflow.constants import DEFAULT_FAILURE_MESSAGE, DEFAULT_SUCCESS_MESSAGE
from wizardflow.models import FormData, FormField, SubmissionStatus
from wizardflow.session import WizardSession, log_notifier
from wizardflow.submission import DelayedFinalizer


def complete_steps(session):
    session.update_field("fullName", "Jo")
    session.update_field("email", "jo@x.com")
    session.go_to_next_step()
    session.update_field("username", "jo_b")
    session.update_field("password", "123456")
    session.go_to_next_step()


class TestWizardSessionFlow:
    def test_full_happy_path(self, session, finalizer, notifier):
        complete_steps(session)
        session.update_field("theme", "Dark")
        assert session.is_dark_mode is True
        assert session.step_title == "Preferences"

        outcome = asyncio.run(session.finish())

        assert outcome.succeeded is True
        assert len(finalizer.calls) == 1
        assert finalizer.statuses_seen == ["submitting"]
        assert notifier.messages == [(DEFAULT_SUCCESS_MESSAGE, True)]
        assert session.is_open is False
        assert session.data == FormData()
        assert session.current_step == 1

    def test_failed_finish_keeps_state(self, notifier):
        session = WizardSession(
            finalizer=RecordingFinalizer(succeed=False),
            notifier=notifier,
        )
        session.open_modal()
        complete_steps(session)
        session.update_field("theme", "Light")

        outcome = asyncio.run(session.finish())

        assert outcome.succeeded is False
        assert notifier.messages == [(DEFAULT_FAILURE_MESSAGE, False)]
        assert session.is_open is True
        assert session.current_step == 3
        assert session.data.username == "jo_b"
        assert session.status is SubmissionStatus.IDLE

    def test_finish_without_theme_reports_failure(self, session, finalizer, notifier):
        complete_steps(session)

        outcome = asyncio.run(session.finish())

        assert outcome.attempted is False
        assert finalizer.calls == []
        assert session.errors == {FormField.THEME: "Please select a theme"}
        assert notifier.messages == [(DEFAULT_FAILURE_MESSAGE, False)]

    def test_back_navigation_clears_errors(self, session):
        complete_steps(session)
        session.validate_step(3)
        assert session.errors

        session.go_to_previous_step()

        assert session.current_step == 2
        assert session.errors == {}

    def test_submit_passthrough(self, session):
        complete_steps(session)
        session.update_field("theme", "Light")

        assert asyncio.run(session.submit()) is True
        # submit alone leaves closing to the caller
        assert session.is_open is True

    def test_close_uses_configured_prompt(self):
        prompts = []
        session = WizardSession(
            confirmer=lambda prompt: prompts.append(prompt) or False,
            config=WizardConfig(confirm_prompt="Really leave?"),
        )
        session.open_modal()
        session.update_field("email", "jo@x.com")

        assert session.close_modal() is False
        assert prompts == ["Really leave?"]

    def test_reset_form(self, session):
        complete_steps(session)

        session.reset_form()

        assert session.snapshot().to_dict()["current_step"] == 1
        assert session.is_dirty is False

    def test_reopen_during_submit_cannot_start_second_finalize(self, notifier):
        calls = []
        inner_results = []

        async def reentrant_finalizer(data):
            calls.append(data)
            session.open_modal()
            complete_steps(session)
            session.update_field("theme", "Light")
            inner_results.append(await session.submit())
            return True

        session = WizardSession(finalizer=reentrant_finalizer, notifier=notifier)
        session.open_modal()
        complete_steps(session)
        session.update_field("theme", "Dark")

        assert asyncio.run(session.submit()) is True
        assert len(calls) == 1
        assert inner_results == [False]
        assert session.status is SubmissionStatus.IDLE

    def test_finish_resets_after_submit_returns(self, session):
        complete_steps(session)
        session.update_field("theme", "Dark")

        asyncio.run(session.finish())

        assert session.is_dirty is False
        assert session.status is SubmissionStatus.IDLE

    def test_error_for_uses_wire_names(self, session):
        session.go_to_next_step()

        assert session.error_for("fullName") == "Full name is required"
        assert session.errors[FormField.FULL_NAME] == "Full name is required"

    def test_progress_follows_step(self, session):
        assert session.progress() == pytest.approx(1 / 3)
        complete_steps(session)
        assert session.progress() == 1.0


class TestWizardSessionDefaults:
    def test_default_finalizer_uses_configured_delay(self):
        session = WizardSession(config=WizardConfig(finalize_delay=0.5))

        assert isinstance(session.submission.finalizer, DelayedFinalizer)
        assert session.submission.finalizer.delay == 0.5

    def test_sessions_do_not_share_state(self):
        first, second = WizardSession(), WizardSession()
        first.update_field("email", "jo@x.com")

        assert second.data.email == ""

    def test_log_notifier(self, caplog):
        with caplog.at_level("INFO", logger="wizardflow.session"):
            log_notifier("All done", True)
            log_notifier("Nope", False)

        assert [record.levelname for record in caplog.records] == ["INFO", "ERROR"]


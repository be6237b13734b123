"""Test doubles and data shared across the WizardFlow test suite."""

from typing import Any

from wizardflow.models import FormData, Theme
from wizardflow.state import FormState


class RecordingFinalizer:
    """Finalizer double that records calls and returns a fixed outcome."""

    def __init__(self, succeed: bool = True, error: Exception | None = None):
        self.succeed = succeed
        self.error = error
        self.calls: list[FormData] = []
        self.statuses_seen: list[str] = []
        self.state: FormState | None = None

    async def __call__(self, data: FormData) -> bool:
        self.calls.append(data)
        if self.state is not None:
            self.statuses_seen.append(self.state.status.value)
        if self.error is not None:
            raise self.error
        return self.succeed


class ScriptedConfirmer:
    """Confirmer double answering every prompt the same way."""

    def __init__(self, answer: bool):
        self.answer = answer
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> bool:
        self.prompts.append(prompt)
        return self.answer


class RecordingNotifier:
    def __init__(self):
        self.messages: list[tuple[str, bool]] = []

    def __call__(self, message: str, success: bool) -> None:
        self.messages.append((message, success))


VALID_ANSWERS: dict[str, Any] = {
    "fullName": "Jo Bloggs",
    "email": "jo@example.com",
    "username": "jo_bloggs",
    "password": "secret123",
    "theme": "Dark",
    "newsletter": True,
}


def fill_valid(state: FormState, theme: Theme = Theme.DARK) -> None:
    """Fill every field of ``state`` with values that pass all rules."""
    state.update_field("fullName", "Jo Bloggs")
    state.update_field("email", "jo@example.com")
    state.update_field("username", "jo_bloggs")
    state.update_field("password", "secret123")
    state.update_field("theme", theme)

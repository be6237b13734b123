"""Pytest configuration and fixtures for WizardFlow tests.

This module provides shared fixtures: fresh form state, step gates, sessions
with scripted finalizers and confirmers, and answers files for CLI testing.
"""

import json

import pytest
from ruamel.yaml import YAML

from tests.helpers import VALID_ANSWERS, RecordingFinalizer, RecordingNotifier, ScriptedConfirmer
from wizardflow.config import WizardConfig
from wizardflow.gate import StepGate
from wizardflow.session import WizardSession
from wizardflow.state import FormState


@pytest.fixture
def state() -> FormState:
    return FormState()


@pytest.fixture
def gate(state) -> StepGate:
    return StepGate(state)


@pytest.fixture
def finalizer() -> RecordingFinalizer:
    return RecordingFinalizer()


@pytest.fixture
def confirmer() -> ScriptedConfirmer:
    return ScriptedConfirmer(True)


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def session(finalizer, confirmer, notifier) -> WizardSession:
    """Open session wired to recording doubles."""
    wizard = WizardSession(
        finalizer=finalizer,
        confirmer=confirmer,
        notifier=notifier,
        config=WizardConfig(finalize_delay=0),
    )
    finalizer.state = wizard.state
    wizard.open_modal()
    return wizard


@pytest.fixture
def answers_file(tmp_path):
    """Create a YAML answers file where every step passes."""
    yaml = YAML()
    yaml.default_flow_style = False
    answers_path = tmp_path / "answers.yaml"
    with open(answers_path, "w") as f:
        yaml.dump(dict(VALID_ANSWERS), f)
    return answers_path


@pytest.fixture
def invalid_answers_file(tmp_path):
    """Create a JSON answers file that fails on the account setup step."""
    answers = dict(VALID_ANSWERS, username="ab", password="123456")
    answers_path = tmp_path / "answers.json"
    with open(answers_path, "w") as f:
        json.dump(answers, f, indent=2)
    return answers_path


@pytest.fixture
def fast_config_file(tmp_path):
    """Config file with no finalize delay."""
    config_path = tmp_path / "wizardflow.yaml"
    config_path.write_text("wizardflow:\n  finalize_delay: 0\n")
    return config_path

"""Tests for the interactive run CLI command.

User input is scripted through CliRunner; each line answers one prompt.
"""

import pytest
from typer.testing import CliRunner

from wizardflow.cli.main import app


@pytest.fixture
def runner():
    return CliRunner()


def lines(*answers: str) -> str:
    return "\n".join(answers) + "\n"


class TestRunCommand:
    """Test suite for the run CLI command."""

    def test_complete_wizard_interactively(self, runner, fast_config_file):
        user_input = lines(
            "edit", "Jo Bloggs", "jo@example.com",
            "next",
            "edit", "jo_bloggs", "secret123",
            "next",
            "edit", "Dark", "y",
            "finish",
        )

        result = runner.invoke(app, ["--config", str(fast_config_file), "run"], input=user_input)

        assert result.exit_code == 0
        assert "Welcome to Quixess!" in result.output
        assert "1 of 3 (33%)" in result.output
        assert "3 of 3 (100%)" in result.output

    def test_blocked_step_shows_errors(self, runner, fast_config_file):
        user_input = lines(
            "next",
            "close",
        )

        result = runner.invoke(app, ["--config", str(fast_config_file), "run"], input=user_input)

        assert "Full name is required" in result.output
        assert "Email is required" in result.output
        assert "Wizard closed." in result.output
        assert result.exit_code == 1

    def test_prefilled_answers_finish(self, runner, fast_config_file, answers_file):
        user_input = lines("next", "next", "finish")

        result = runner.invoke(
            app,
            ["--config", str(fast_config_file), "run", "--answers", str(answers_file)],
            input=user_input,
        )

        assert result.exit_code == 0
        assert "Welcome to Quixess!" in result.output

    def test_failed_finish_keeps_wizard_open(self, runner, fast_config_file, answers_file):
        user_input = lines("next", "next", "finish", "close", "y")

        result = runner.invoke(
            app,
            ["--config", str(fast_config_file), "run", "--answers", str(answers_file), "--fail"],
            input=user_input,
        )

        assert "Something went wrong. Please try again." in result.output
        assert "Close and lose progress?" in result.output
        assert "Wizard closed." in result.output
        assert result.exit_code == 1

    def test_declined_close_keeps_wizard_open(self, runner, fast_config_file, answers_file):
        user_input = lines("close", "n", "back", "close", "y")

        result = runner.invoke(
            app,
            ["--config", str(fast_config_file), "run", "--answers", str(answers_file)],
            input=user_input,
        )

        assert result.output.count("Close and lose progress?") == 2
        assert result.exit_code == 1

    def test_finish_only_on_last_step(self, runner, fast_config_file, answers_file):
        user_input = lines("finish", "close", "y")

        result = runner.invoke(
            app,
            ["--config", str(fast_config_file), "run", "--answers", str(answers_file)],
            input=user_input,
        )

        assert "Finish is only available on the last step." in result.output
        assert result.exit_code == 1

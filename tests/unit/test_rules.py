"""Unit tests for the wizardflow.rules module.

Covers every field predicate's messages and boundaries, and FieldRule
evaluation against form data.
"""

import pytest

from wizardflow.models import FormData, FormField, Theme
from wizardflow.rules import (
    FIELD_RULES,
    FieldRule,
    RuleResult,
    get_rule,
    validate_email,
    validate_full_name,
    validate_password,
    validate_theme,
    validate_username,
)


class TestValidateFullName:
    """Test suite for validate_full_name."""

    @pytest.mark.parametrize("value", ["", "   ", "\t\n"])
    def test_blank_name_is_required(self, value):
        assert validate_full_name(value) == "Full name is required"

    @pytest.mark.parametrize("value", ["J", "  J  "])
    def test_short_name_measured_after_trimming(self, value):
        assert validate_full_name(value) == "Name must be at least 2 characters"

    @pytest.mark.parametrize("value", ["Jo", " Jo ", "Jo Bloggs"])
    def test_valid_name_passes(self, value):
        assert validate_full_name(value) is None


class TestValidateEmail:
    """Test suite for validate_email."""

    @pytest.mark.parametrize("value", ["", "  "])
    def test_blank_email_is_required(self, value):
        assert validate_email(value) == "Email is required"

    @pytest.mark.parametrize(
        "value",
        [
            "jo",
            "jo@",
            "jo@example",
            "@example.com",
            "jo@example.",
            "jo @example.com",
            "jo@@example.com",
            " jo@example.com",
            "jo@example.com\n",
        ],
    )
    def test_malformed_email_is_rejected(self, value):
        assert validate_email(value) == "Please enter a valid email address"

    @pytest.mark.parametrize("value", ["jo@x.com", "jo.bloggs@mail.example.co.uk", "a+b@c.d"])
    def test_valid_email_passes(self, value):
        assert validate_email(value) is None


class TestValidateUsername:
    """Test suite for validate_username."""

    def test_blank_username_is_required(self):
        assert validate_username("   ") == "Username is required"

    def test_short_username_is_rejected(self):
        assert validate_username("ab") == "Username must be at least 3 characters"

    def test_length_uses_raw_value(self):
        """Whitespace counts toward the minimum length, then fails the charset check."""
        assert validate_username(" ab") == "Username can only contain letters, numbers, and underscores"

    @pytest.mark.parametrize("value", ["jo-bloggs", "jo bloggs", "jö_b", "abc\n"])
    def test_invalid_characters_are_rejected(self, value):
        assert validate_username(value) == "Username can only contain letters, numbers, and underscores"

    @pytest.mark.parametrize("value", ["abc", "Jo_Bloggs_99", "___"])
    def test_valid_username_passes(self, value):
        assert validate_username(value) is None


class TestValidatePassword:
    """Test suite for validate_password."""

    def test_blank_password_is_required(self):
        assert validate_password("      ") == "Password is required"

    def test_short_password_is_rejected(self):
        assert validate_password("12345") == "Password must be at least 6 characters"

    def test_length_uses_raw_value(self):
        assert validate_password(" 1234 ") is None

    def test_six_characters_pass(self):
        assert validate_password("123456") is None


class TestValidateTheme:
    """Test suite for validate_theme."""

    @pytest.mark.parametrize("value", [Theme.NONE, None, ""])
    def test_missing_theme_is_rejected(self, value):
        assert validate_theme(value) == "Please select a theme"

    @pytest.mark.parametrize("value", [Theme.LIGHT, Theme.DARK])
    def test_selected_theme_passes(self, value):
        assert validate_theme(value) is None


class TestFieldRule:
    """Test suite for FieldRule evaluation."""

    def test_rule_result_on_failure(self):
        # Arrange
        rule = FieldRule(FormField.EMAIL, validate_email)
        data = FormData(email="nope")

        # Act
        result = rule.validate(data)

        # Assert
        assert result == RuleResult(
            success=False,
            field=FormField.EMAIL,
            value="nope",
            error_message="Please enter a valid email address",
        )

    def test_rule_result_on_success_has_empty_message(self):
        result = FieldRule(FormField.FULL_NAME, validate_full_name).validate(FormData(full_name="Jo"))

        assert result.success is True
        assert result.error_message == ""

    def test_every_field_but_newsletter_has_a_rule(self):
        assert set(FIELD_RULES) == set(FormField) - {FormField.NEWSLETTER}
        assert get_rule(FormField.NEWSLETTER) is None
        assert get_rule(FormField.THEME).field is FormField.THEME

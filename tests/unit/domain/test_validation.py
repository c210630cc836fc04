"""Unit tests for profile form validation."""

import pytest

from domain.services.validation import (
    PasswordStrength,
    get_password_strength,
    validate_bio,
    validate_email,
    validate_name,
    validate_password,
    validate_profile_form,
)


class TestValidateEmail:
    @pytest.mark.parametrize(
        "email",
        [
            "test@example.com",
            "first.last+tag@sub.domain.org",
            "a_b%c-d@x-y.io",
            "UPPER@EXAMPLE.COM",
        ],
    )
    def test_accepts_valid_addresses(self, email: str):
        assert validate_email(email) is True

    @pytest.mark.parametrize(
        "email",
        [
            "",
            "plainaddress",
            "missing-at.example.com",
            "no-dot@example",
            "short-tld@example.c",
            "two@@example.com",
            "@example.com",
            "user@.com1",
            "spaces in@example.com",
            "trailing@example.com\n",
        ],
    )
    def test_rejects_invalid_addresses(self, email: str):
        assert validate_email(email) is False


class TestValidatePassword:
    def test_accepts_mixed_password(self):
        assert validate_password("Password1") is True

    @pytest.mark.parametrize(
        "password",
        [
            "Pass1",  # too short
            "password1",  # no uppercase
            "PASSWORD1",  # no lowercase
            "Password",  # no digit
            "",
        ],
    )
    def test_rejects_weak_passwords(self, password: str):
        assert validate_password(password) is False


class TestValidateName:
    def test_accepts_two_characters(self):
        assert validate_name("Al") is True

    def test_rejects_single_character_after_trim(self):
        assert validate_name("  A  ") is False

    def test_rejects_blank(self):
        assert validate_name("   ") is False


class TestValidateBio:
    def test_accepts_empty(self):
        assert validate_bio("") is True

    def test_accepts_exactly_max(self):
        assert validate_bio("x" * 300) is True

    def test_rejects_over_max(self):
        assert validate_bio("x" * 301) is False

    def test_trims_before_measuring(self):
        assert validate_bio("  " + "x" * 300 + "  ") is True

    def test_custom_max_length(self):
        assert validate_bio("hello", max_length=4) is False


class TestPasswordStrength:
    def test_short_password_is_always_weak(self):
        assert get_password_strength("Ab1!") == PasswordStrength.WEAK
        assert get_password_strength("Aa1!Aa1") == PasswordStrength.WEAK

    def test_single_class_is_weak(self):
        assert get_password_strength("abcdefgh") == PasswordStrength.WEAK

    def test_two_classes_is_medium(self):
        assert get_password_strength("abcdefg1") == PasswordStrength.MEDIUM

    def test_four_points_or_more_is_strong(self):
        assert get_password_strength("Abcdefg1") == PasswordStrength.MEDIUM
        assert get_password_strength("Abcdef1!") == PasswordStrength.STRONG
        assert get_password_strength("Abcdefghijk1") == PasswordStrength.STRONG

    def test_adding_a_character_class_never_lowers_the_tier(self):
        order = [PasswordStrength.WEAK, PasswordStrength.MEDIUM, PasswordStrength.STRONG]
        steps = ["abcdefgh", "abcdefg1", "Abcdefg1", "Abcdef1!", "Abcdef1!xyzw"]
        tiers = [order.index(get_password_strength(p)) for p in steps]
        assert tiers == sorted(tiers)


class TestValidateProfileForm:
    def test_valid_creation_form(self):
        errors = validate_profile_form(
            name="Ada",
            email="ada@example.com",
            bio="",
            password="Password1",
            confirm_password="Password1",
        )
        assert errors == {}

    def test_reports_every_failing_field(self):
        errors = validate_profile_form(
            name="A",
            email="nope",
            bio="x" * 301,
            password="weak",
            confirm_password="other",
        )
        assert set(errors) == {"name", "email", "password", "confirm_password", "bio"}
        assert errors["confirm_password"] == "Passwords do not match"

    def test_editing_skips_password_checks(self):
        errors = validate_profile_form(
            name="Ada",
            email="ada@example.com",
            require_password=False,
        )
        assert errors == {}

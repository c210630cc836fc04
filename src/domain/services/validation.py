"""Profile form validation helpers.

Pure functions with no side effects. Callers run them on raw form input
before asking the profile service to create or update anything.
"""

import re
from enum import StrEnum

EMAIL_REGEX = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")

# At least 8 characters with one digit, one lowercase and one uppercase letter
PASSWORD_REGEX = re.compile(r"^(?=.*\d)(?=.*[a-z])(?=.*[A-Z]).{8,}$", re.DOTALL | re.ASCII)

DEFAULT_BIO_MAX_LENGTH = 300
NAME_MIN_LENGTH = 2


class PasswordStrength(StrEnum):
    """Coarse password strength tier."""

    WEAK = "weak"
    MEDIUM = "medium"
    STRONG = "strong"


def validate_email(email: str) -> bool:
    return EMAIL_REGEX.fullmatch(email) is not None


def validate_password(password: str) -> bool:
    return PASSWORD_REGEX.fullmatch(password) is not None


def validate_name(name: str) -> bool:
    return len(name.strip()) >= NAME_MIN_LENGTH


def validate_bio(bio: str, max_length: int = DEFAULT_BIO_MAX_LENGTH) -> bool:
    return len(bio.strip()) <= max_length


def get_password_strength(password: str) -> PasswordStrength:
    """Score a password.

    Anything shorter than 8 characters is weak. Longer passwords earn a
    point each for reaching 12 characters, containing an uppercase letter,
    a lowercase letter, a digit and a symbol.
    """
    if len(password) < 8:
        return PasswordStrength.WEAK

    score = 0
    if len(password) >= 12:
        score += 1
    if re.search(r"[A-Z]", password):
        score += 1
    if re.search(r"[a-z]", password):
        score += 1
    if re.search(r"[0-9]", password):
        score += 1
    if re.search(r"[^A-Za-z0-9]", password):
        score += 1

    if score >= 4:
        return PasswordStrength.STRONG
    if score >= 2:
        return PasswordStrength.MEDIUM
    return PasswordStrength.WEAK


def validate_profile_form(
    name: str,
    email: str,
    bio: str = "",
    password: str | None = None,
    confirm_password: str | None = None,
    require_password: bool = True,
    bio_max_length: int = DEFAULT_BIO_MAX_LENGTH,
) -> dict[str, str]:
    """Validate a submitted profile form.

    Returns:
        Mapping of field name to error message for every failing field.
        Empty when the form is valid. Password fields are only checked when
        ``require_password`` is set (profile creation).
    """
    errors: dict[str, str] = {}

    if not validate_name(name):
        errors["name"] = "Name must be at least 2 characters"
    if not validate_email(email):
        errors["email"] = "Please enter a valid email address"
    if require_password:
        if not validate_password(password or ""):
            errors["password"] = (
                "Password must be at least 8 characters with 1 uppercase, "
                "1 lowercase, and 1 number"
            )
        if password != confirm_password:
            errors["confirm_password"] = "Passwords do not match"
    if not validate_bio(bio, bio_max_length):
        errors["bio"] = f"Bio must be under {bio_max_length} characters"

    return errors

"""Format rules for registration input.

Each validator returns None on success and raises ValidationError otherwise.
"""

import re

from domain.model.errors import ValidationError

EMAIL_MAX_LENGTH = 255
USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 50
PASSWORD_MIN_LENGTH = 8
PASSWORD_SPECIAL_CHARS = "!@#$%^&*()_+-=[]{}|;:,.<>?"

_EMAIL_RE = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
_USERNAME_RE = re.compile(r"^[a-zA-Z0-9][a-zA-Z0-9_-]*[a-zA-Z0-9]$")


def validate_email(email: str) -> None:
    """Check ``local@domain.tld`` with a TLD of at least two letters.

    Valid: ``user@email.com``, ``name.surname@company.com.br``.
    Invalid: ``email@``, ``@email.com``, ``email.com``, ``user@com``.
    """
    if not _EMAIL_RE.fullmatch(email):
        raise ValidationError("Invalid email format")
    if len(email) > EMAIL_MAX_LENGTH:
        raise ValidationError(f"Email is too long (max {EMAIL_MAX_LENGTH} characters)")


def validate_username(username: str) -> None:
    """Check length, charset and that the name starts and ends alphanumeric."""
    if len(username) < USERNAME_MIN_LENGTH:
        raise ValidationError(
            f"Username must be at least {USERNAME_MIN_LENGTH} characters long"
        )
    if len(username) > USERNAME_MAX_LENGTH:
        raise ValidationError(
            f"Username is too long (max {USERNAME_MAX_LENGTH} characters)"
        )
    if not _USERNAME_RE.fullmatch(username):
        raise ValidationError(
            "Username can only contain letters, numbers, underscore and hyphen. "
            "Cannot start or end with special characters"
        )


def validate_password(password: str) -> None:
    """Check password strength, reporting every unmet rule at once."""
    errors = []

    if len(password) < PASSWORD_MIN_LENGTH:
        errors.append(f"at least {PASSWORD_MIN_LENGTH} characters")
    if not any(c.isupper() for c in password):
        errors.append("at least one uppercase letter (A-Z)")
    if not any(c.islower() for c in password):
        errors.append("at least one lowercase letter (a-z)")
    if not any(c.isdigit() for c in password):
        errors.append("at least one number (0-9)")
    if not any(c in PASSWORD_SPECIAL_CHARS for c in password):
        errors.append("at least one special character")

    if errors:
        raise ValidationError("Password must contain: " + ", ".join(errors))

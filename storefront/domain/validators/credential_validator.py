"""
Credential and profile field validation.

Every validator is a pure function returning a ValidationResult that carries
either the normalized value or a human-readable error, never both.
"""
# Standard library imports
import re
from dataclasses import dataclass

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 30
PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 100
FULL_NAME_MAX_LENGTH = 80
BIO_MAX_LENGTH = 160

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    value: str = ""
    error: str = ""

    @classmethod
    def ok(cls, value: str = "") -> "ValidationResult":
        return cls(valid=True, value=value)

    @classmethod
    def fail(cls, error: str) -> "ValidationResult":
        return cls(valid=False, error=error)


def normalize_email(email: str) -> str:
    """Trim and lowercase an email for storage and comparison"""
    return (email or "").strip().lower()


def validate_username(username: str) -> ValidationResult:
    if not username:
        return ValidationResult.fail("Username is required")

    trimmed = username.strip()
    if not USERNAME_MIN_LENGTH <= len(trimmed) <= USERNAME_MAX_LENGTH:
        return ValidationResult.fail(
            f"Username must be {USERNAME_MIN_LENGTH}-{USERNAME_MAX_LENGTH} characters"
        )

    return ValidationResult.ok(trimmed)


def validate_email(email: str) -> ValidationResult:
    if not email:
        return ValidationResult.fail("Email is required")

    normalized = normalize_email(email)
    if not EMAIL_PATTERN.fullmatch(normalized):
        return ValidationResult.fail("Invalid email format")

    return ValidationResult.ok(normalized)


def validate_password(password: str) -> ValidationResult:
    """Length checks only; the raw password is returned unchanged."""
    if not password:
        return ValidationResult.fail("Password is required")

    if len(password) < PASSWORD_MIN_LENGTH:
        return ValidationResult.fail(
            f"Password must be at least {PASSWORD_MIN_LENGTH} characters long"
        )

    if len(password) > PASSWORD_MAX_LENGTH:
        return ValidationResult.fail(
            f"Password must be {PASSWORD_MAX_LENGTH} characters or less"
        )

    return ValidationResult.ok(password)


def validate_profile(full_name: str = "", bio: str = "") -> ValidationResult:
    """Both fields are optional; only their trimmed lengths are checked."""
    trimmed_full_name = (full_name or "").strip()
    trimmed_bio = (bio or "").strip()

    if len(trimmed_full_name) > FULL_NAME_MAX_LENGTH:
        return ValidationResult.fail(
            f"Full name must be {FULL_NAME_MAX_LENGTH} characters or less"
        )

    if len(trimmed_bio) > BIO_MAX_LENGTH:
        return ValidationResult.fail(
            f"Bio must be {BIO_MAX_LENGTH} characters or less"
        )

    return ValidationResult.ok()

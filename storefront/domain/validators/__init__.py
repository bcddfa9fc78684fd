from .credential_validator import (
    ValidationResult,
    normalize_email,
    validate_username,
    validate_email,
    validate_password,
    validate_profile,
)

__all__ = [
    "ValidationResult",
    "normalize_email",
    "validate_username",
    "validate_email",
    "validate_password",
    "validate_profile",
]

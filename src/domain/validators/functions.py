"""Centralized validation functions (DRY principle).

All validation logic defined once, reused everywhere via Annotated types.
Validators are pure functions that raise ValueError on validation failure.
"""

import re

_EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
_PHONE_PATTERN = re.compile(r"^\+?[0-9]{8,15}$")

# bcrypt rejects longer secrets
MAX_PASSWORD_BYTES = 72


def validate_email(v: str) -> str:
    """Validate email format.

    Args:
        v: Email address to validate.

    Returns:
        Normalized email (lowercase, stripped).

    Raises:
        ValueError: If email format is invalid.

    Example:
        >>> validate_email("User@Example.COM")
        'user@example.com'
    """
    v = v.strip()
    if not _EMAIL_PATTERN.match(v):
        raise ValueError(f"Invalid email format: {v}")
    return v.lower()


def validate_strong_password(v: str) -> str:
    """Validate password strength.

    Requirements:
        - At least 6 characters
        - At most 72 bytes once UTF-8 encoded
        - At least one uppercase letter, one lowercase letter and one digit

    Args:
        v: Password to validate.

    Returns:
        Password unchanged (validation only).

    Raises:
        ValueError: If password doesn't meet requirements.
    """
    if len(v) < 6:
        raise ValueError("Password must be at least 6 characters")
    if len(v.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
    if not any(c.isupper() for c in v):
        raise ValueError("Password must contain uppercase letter")
    if not any(c.islower() for c in v):
        raise ValueError("Password must contain lowercase letter")
    if not any(c.isdigit() for c in v):
        raise ValueError("Password must contain digit")
    return v


def validate_six_digit_code(v: str) -> str:
    """Validate a six-digit numeric code (email code or TOTP).

    Args:
        v: Submitted code.

    Returns:
        Code stripped of surrounding whitespace.

    Raises:
        ValueError: If the code is not exactly six digits.
    """
    v = v.strip()
    if len(v) != 6 or not v.isdigit():
        raise ValueError("Code must be exactly 6 digits")
    return v


def validate_phone_number(v: str) -> str:
    """Validate a phone number (digits with optional leading +).

    Args:
        v: Phone number, separators allowed.

    Returns:
        Phone number with spaces, dashes and parentheses removed.

    Raises:
        ValueError: If the number has an unexpected shape.
    """
    compact = re.sub(r"[\s\-()]", "", v)
    if not _PHONE_PATTERN.match(compact):
        raise ValueError("Invalid phone number")
    return compact

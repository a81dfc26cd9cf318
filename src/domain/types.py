"""Annotated types with centralized validation (DRY principle).

Define validation once, use everywhere (request schemas and commands).

Usage:
    from src.domain.types import Email, Password, SixDigitCode

    class LoginRequest(BaseModel):
        email: Email
        password: str
"""

from typing import Annotated

from pydantic import AfterValidator, Field

from src.domain.validators import (
    validate_email,
    validate_phone_number,
    validate_six_digit_code,
    validate_strong_password,
)

Email = Annotated[
    str,
    Field(
        min_length=5,
        max_length=255,
        description="Email address",
        examples=["user@example.com"],
    ),
    AfterValidator(validate_email),
]
"""Email address, validated and normalized to lowercase."""

Password = Annotated[
    str,
    Field(
        min_length=6,
        max_length=72,
        description="Password (6-72 bytes, upper, lower, digit)",
        examples=["SecurePass123"],
    ),
    AfterValidator(validate_strong_password),
]
"""Password with strength validation."""

SixDigitCode = Annotated[
    str,
    Field(
        min_length=6,
        max_length=6,
        description="Six-digit numeric code",
        examples=["123456"],
    ),
    AfterValidator(validate_six_digit_code),
]
"""Email verification code or TOTP code."""

PhoneNumber = Annotated[
    str,
    Field(
        min_length=8,
        max_length=20,
        description="Contact phone number",
        examples=["+84901234567"],
    ),
    AfterValidator(validate_phone_number),
]
"""Phone number, separators stripped."""

"""
Pydantic schemas for the credential API.
"""

from __future__ import annotations

from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator

# bcrypt only reads the first 72 bytes of its input.
MAX_PASSWORD_BYTES = 72

# Surrounding whitespace is stripped before the length check, so blanks fail.
NonBlankStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]


def _check_password_bytes(value: str) -> str:
    if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"password must be at most {MAX_PASSWORD_BYTES} bytes in UTF-8")
    return value


# ═══════════════════════════════════════════════════════════════════════════════
# Requests
# ═══════════════════════════════════════════════════════════════════════════════


class RegisterRequest(BaseModel):
    username: NonBlankStr
    name: NonBlankStr
    password: str = Field(..., min_length=1, max_length=100)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        return _check_password_bytes(value)


class LoginRequest(BaseModel):
    username: NonBlankStr
    password: str = Field(..., min_length=1, max_length=100)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        return _check_password_bytes(value)


# ═══════════════════════════════════════════════════════════════════════════════
# Responses
# ═══════════════════════════════════════════════════════════════════════════════


class UserResponse(BaseModel):
    """Public view of a user; ``token`` is only set by login."""

    model_config = ConfigDict(from_attributes=True)

    username: str
    name: str
    token: Optional[str] = None


class ErrorResponse(BaseModel):
    code: str
    detail: str
    errors: list = Field(default_factory=list)

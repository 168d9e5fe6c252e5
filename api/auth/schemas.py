"""
Auth API schemas (request/response models).
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

# bcrypt only looks at the first 72 bytes of a secret.
MAX_PASSWORD_BYTES = 72


class CredentialsRequest(BaseModel):
    username: str = Field(..., min_length=1, max_length=150)
    password: str = Field(..., min_length=1, max_length=MAX_PASSWORD_BYTES)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes.")
        return value


class SignupRequest(CredentialsRequest):
    pass


class LoginRequest(CredentialsRequest):
    pass


class TokenResponse(BaseModel):
    message: str
    token: str

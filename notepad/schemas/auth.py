"""
Auth Schemas.

Pydantic schemas for registration, login and password change.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

# bcrypt only looks at the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


def _check_password(value: str) -> str:
    if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"must be at most {MAX_PASSWORD_BYTES} bytes")
    return value


class Credentials(BaseModel):
    """Username and password pair, used for both registration and login."""

    username: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Unique username",
        examples=["alice"],
    )
    password: str = Field(
        ...,
        min_length=1,
        description="Plain-text password",
        examples=["correct-horse-battery-staple"],
    )

    @field_validator("username")
    @classmethod
    def username_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        return _check_password(value)


class RegisterRequest(Credentials):
    """Schema for POST /auth/register."""


class LoginRequest(Credentials):
    """Schema for POST /auth/login."""


class ChangePasswordRequest(BaseModel):
    """Schema for POST /auth/change-password."""

    current_password: str = Field(..., alias="currentPassword", min_length=1)
    new_password: str = Field(..., alias="newPassword", min_length=1)

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("current_password", "new_password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        return _check_password(value)


class UserSummary(BaseModel):
    """Public view of a user."""

    id: str
    username: str

    model_config = ConfigDict(from_attributes=True)


class LoginResponse(BaseModel):
    """Schema for a successful login."""

    token: str = Field(description="Bearer token for the Authorization header")
    user: UserSummary

"""Request/response schemas for auth and user endpoints."""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field, field_validator

from app.core.security import (
    EMAIL_MAX_LEN,
    FULL_NAME_MAX_LEN,
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    ROLE_STUDENT,
    SELF_REGISTRATION_ROLES,
    USERNAME_MAX_LEN,
    USERNAME_MIN_LEN,
)
from app.schemas.base import CamelModel


class RegisterRequest(CamelModel):
    """
    Registration body. The field is called passwordHash on the wire for
    compatibility with existing clients, but it carries the plain password.
    """

    username: str = Field(..., description="Unique username")
    email: EmailStr = Field(..., description="Unique email address")
    password_hash: str = Field(
        ...,
        min_length=PASSWORD_MIN_LEN,
        max_length=PASSWORD_MAX_LEN,
        description="Plain-text password; hashed before storage",
    )
    full_name: str | None = Field(default=None, max_length=FULL_NAME_MAX_LEN)
    role: str | None = Field(default=ROLE_STUDENT, description="student or instructor; null means student")

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str) -> str:
        v = v.strip()
        if not (USERNAME_MIN_LEN <= len(v) <= USERNAME_MAX_LEN):
            raise ValueError(
                f"Username must be {USERNAME_MIN_LEN}-{USERNAME_MAX_LEN} characters"
            )
        return v

    @field_validator("email")
    @classmethod
    def validate_email_length(cls, v: str) -> str:
        if len(v) > EMAIL_MAX_LEN:
            raise ValueError(f"Email must be at most {EMAIL_MAX_LEN} characters")
        return v

    @field_validator("full_name")
    @classmethod
    def validate_full_name(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return v.strip() or None

    @field_validator("role")
    @classmethod
    def validate_role(cls, v: str | None) -> str:
        role = (v or ROLE_STUDENT).strip().lower()
        if role not in SELF_REGISTRATION_ROLES:
            raise ValueError(
                f"Role must be one of: {', '.join(SELF_REGISTRATION_ROLES)}"
            )
        return role


class LoginRequest(BaseModel):
    """Credentials for the token endpoint."""

    username: str = Field(..., min_length=1, max_length=255, description="Username")
    password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LEN, description="Password")


class TokenResponse(BaseModel):
    """JWT access token returned after successful authentication."""

    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")


class UserResponse(CamelModel):
    """User as returned to clients. Has no password field at all."""

    id: int
    username: str
    email: str
    full_name: str | None = None
    role: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class UserSummary(CamelModel):
    """Short user reference embedded in course and feedback bodies."""

    id: int
    username: str
    full_name: str | None = None


class ProfileUpdateRequest(CamelModel):
    """Fields a user may change on their own profile."""

    full_name: str | None = Field(default=None, max_length=FULL_NAME_MAX_LEN)
    email: EmailStr | None = None

    @field_validator("email")
    @classmethod
    def validate_email_length(cls, v: str | None) -> str | None:
        if v is not None and len(v) > EMAIL_MAX_LEN:
            raise ValueError(f"Email must be at most {EMAIL_MAX_LEN} characters")
        return v


class CurrentUser(BaseModel):
    """Authenticated user (id, username, role) for dependency injection."""

    id: int
    username: str
    role: str

    model_config = {"from_attributes": True}


class UsersListResponse(BaseModel):
    """Response for GET /users (admin only)."""

    users: list[UserResponse]


class ErrorResponse(BaseModel):
    """Body of every error response."""

    error: str

"""Pydantic request/response schemas."""

from app.schemas.auth import (
    CurrentUser,
    ErrorResponse,
    LoginRequest,
    ProfileUpdateRequest,
    RegisterRequest,
    TokenResponse,
    UserResponse,
    UsersListResponse,
    UserSummary,
)
from app.schemas.courses import (
    CourseCreateRequest,
    CourseResponse,
    EnrollmentCreateRequest,
    EnrollmentResponse,
    FeedbackCreateRequest,
    FeedbackResponse,
)
from app.schemas.health import HealthResponse

__all__ = [
    "CourseCreateRequest",
    "CourseResponse",
    "CurrentUser",
    "EnrollmentCreateRequest",
    "EnrollmentResponse",
    "ErrorResponse",
    "FeedbackCreateRequest",
    "FeedbackResponse",
    "HealthResponse",
    "LoginRequest",
    "ProfileUpdateRequest",
    "RegisterRequest",
    "TokenResponse",
    "UserResponse",
    "UsersListResponse",
    "UserSummary",
]

"""Request/response schemas for courses, enrollments and feedback."""

from datetime import datetime

from pydantic import Field, field_validator

from app.schemas.auth import UserSummary
from app.schemas.base import CamelModel

TITLE_MAX_LEN = 100
CATEGORY_MAX_LEN = 50
DESCRIPTION_MAX_LEN = 10_000
FEEDBACK_MAX_LEN = 5_000
# Upper bound of the INTEGER primary keys; larger ids can never match a row.
ID_MAX = 2_147_483_647


class CourseCreateRequest(CamelModel):
    """Body for POST /courses."""

    title: str = Field(..., max_length=TITLE_MAX_LEN)
    description: str | None = Field(default=None, max_length=DESCRIPTION_MAX_LEN)
    category: str | None = Field(default=None, max_length=CATEGORY_MAX_LEN)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Title must not be empty")
        return v

    @field_validator("category")
    @classmethod
    def validate_category(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return v.strip() or None


class CourseResponse(CamelModel):
    id: int
    title: str
    description: str | None = None
    category: str | None = None
    created_by: UserSummary | None = None
    created_at: datetime | None = None


class EnrollmentCreateRequest(CamelModel):
    """Body for POST /enrollments."""

    course_id: int = Field(..., ge=1, le=ID_MAX)


class EnrollmentResponse(CamelModel):
    id: int
    user_id: int
    course_id: int
    enrolled_at: datetime | None = None
    course: CourseResponse | None = None


class FeedbackCreateRequest(CamelModel):
    """Body for POST /feedback."""

    course_id: int = Field(..., ge=1, le=ID_MAX)
    feedback: str = Field(..., max_length=FEEDBACK_MAX_LEN)

    @field_validator("feedback")
    @classmethod
    def validate_feedback(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Feedback must not be empty")
        return v


class FeedbackResponse(CamelModel):
    id: int
    user_id: int
    course_id: int
    feedback: str
    created_at: datetime | None = None
    user: UserSummary | None = None

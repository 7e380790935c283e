"""SQLAlchemy ORM models."""

from app.models.base import Base
from app.models.course import Course
from app.models.enrollment import Enrollment
from app.models.feedback import Feedback
from app.models.user import User

__all__ = ["Base", "Course", "Enrollment", "Feedback", "User"]

"""ORM model joining users to the courses they enrolled in."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, func
from sqlalchemy.orm import relationship

from app.models.base import Base


class Enrollment(Base):
    """
    Many-to-many link between User and Course with a timestamp.

    No unique constraint on (user_id, course_id): a user may enroll in the
    same course more than once.
    """

    __tablename__ = "enrollments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    course_id = Column(Integer, ForeignKey("courses.id"), nullable=False, index=True)
    enrolled_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    user = relationship("User")
    course = relationship("Course", lazy="joined")

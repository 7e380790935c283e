"""Enrollments: link a user to a course."""

import logging

from sqlalchemy.orm import Session

from app.models import Enrollment
from app.services.courses import get_course

logger = logging.getLogger(__name__)


def enroll(db: Session, user_id: int, course_id: int) -> Enrollment:
    """
    Enroll the user in the course. Raises CourseNotFoundError if it does not exist.

    Repeated enrollment in the same course creates another row.
    """
    course = get_course(db, course_id)
    enrollment = Enrollment(user_id=user_id, course_id=course.id)
    db.add(enrollment)
    db.commit()
    db.refresh(enrollment)
    logger.info(
        "User enrolled",
        extra={"enrollment_id": enrollment.id, "user_id": user_id, "course_id": course.id},
    )
    return enrollment


def list_enrollments_for_user(db: Session, user_id: int) -> list[Enrollment]:
    """Enrollments of one user, newest first."""
    return (
        db.query(Enrollment)
        .filter(Enrollment.user_id == user_id)
        .order_by(Enrollment.enrolled_at.desc(), Enrollment.id.desc())
        .all()
    )

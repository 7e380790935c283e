"""Free-text feedback on courses."""

import logging

from sqlalchemy.orm import Session

from app.models import Feedback
from app.services.courses import get_course

logger = logging.getLogger(__name__)


def submit_feedback(db: Session, user_id: int, course_id: int, text: str) -> Feedback:
    """Store feedback from a user on a course. Raises CourseNotFoundError if it does not exist."""
    course = get_course(db, course_id)
    entry = Feedback(user_id=user_id, course_id=course.id, feedback=text)
    db.add(entry)
    db.commit()
    db.refresh(entry)
    logger.info(
        "Feedback submitted",
        extra={"feedback_id": entry.id, "user_id": user_id, "course_id": course.id},
    )
    return entry


def list_feedback_for_course(db: Session, course_id: int) -> list[Feedback]:
    """All feedback for a course, newest first. Raises CourseNotFoundError for unknown ids."""
    get_course(db, course_id)
    return (
        db.query(Feedback)
        .filter(Feedback.course_id == course_id)
        .order_by(Feedback.created_at.desc(), Feedback.id.desc())
        .all()
    )

"""Course records: list, fetch and create."""

import logging

from sqlalchemy.orm import Session

from app.models import Course

logger = logging.getLogger(__name__)


class CourseNotFoundError(Exception):
    """Raised when a course id does not exist."""

    def __init__(self, course_id: int) -> None:
        self.course_id = course_id
        self.message = f"Course {course_id} not found"
        super().__init__(self.message)


def list_courses(db: Session, category: str | None = None) -> list[Course]:
    """All courses ordered by id, optionally restricted to one category."""
    query = db.query(Course)
    if category:
        query = query.filter(Course.category == category)
    return query.order_by(Course.id).all()


def get_course(db: Session, course_id: int) -> Course:
    course = db.query(Course).filter(Course.id == course_id).first()
    if course is None:
        raise CourseNotFoundError(course_id)
    return course


def create_course(
    db: Session,
    creator_id: int,
    *,
    title: str,
    description: str | None = None,
    category: str | None = None,
) -> Course:
    course = Course(
        title=title,
        description=description,
        category=category,
        created_by_id=creator_id,
    )
    db.add(course)
    db.commit()
    db.refresh(course)
    logger.info(
        "Course created",
        extra={"course_id": course.id, "created_by": creator_id},
    )
    return course

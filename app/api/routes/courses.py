"""Course catalogue endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from sqlalchemy.orm import Session

from app.api.deps import require_instructor
from app.core.database import get_db
from app.schemas.auth import CurrentUser, ErrorResponse
from app.schemas.courses import ID_MAX, CourseCreateRequest, CourseResponse
from app.services.courses import CourseNotFoundError, create_course, get_course, list_courses

router = APIRouter()


@router.get("", response_model=list[CourseResponse])
def get_courses(
    db: Annotated[Session, Depends(get_db)],
    category: Annotated[str | None, Query(max_length=50)] = None,
) -> list[CourseResponse]:
    return [CourseResponse.model_validate(c) for c in list_courses(db, category)]


@router.get(
    "/{course_id}",
    response_model=CourseResponse,
    responses={404: {"model": ErrorResponse}},
)
def get_course_by_id(
    course_id: Annotated[int, Path(ge=1, le=ID_MAX)],
    db: Annotated[Session, Depends(get_db)],
) -> CourseResponse:
    try:
        course = get_course(db, course_id)
    except CourseNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e
    return CourseResponse.model_validate(course)


@router.post(
    "",
    response_model=CourseResponse,
    status_code=status.HTTP_201_CREATED,
)
def post_course(
    body: CourseCreateRequest,
    current_user: Annotated[CurrentUser, Depends(require_instructor)],
    db: Annotated[Session, Depends(get_db)],
) -> CourseResponse:
    """Create a course owned by the calling instructor (or admin)."""
    course = create_course(
        db,
        current_user.id,
        title=body.title,
        description=body.description,
        category=body.category,
    )
    return CourseResponse.model_validate(course)

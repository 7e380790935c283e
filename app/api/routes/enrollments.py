"""Enrollment endpoints for the current user."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.api.deps import get_current_user
from app.core.database import get_db
from app.schemas.auth import CurrentUser, ErrorResponse
from app.schemas.courses import EnrollmentCreateRequest, EnrollmentResponse
from app.services.courses import CourseNotFoundError
from app.services.enrollments import enroll, list_enrollments_for_user

router = APIRouter()


@router.post(
    "",
    response_model=EnrollmentResponse,
    status_code=status.HTTP_201_CREATED,
    responses={404: {"model": ErrorResponse}},
)
def post_enrollment(
    body: EnrollmentCreateRequest,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> EnrollmentResponse:
    try:
        enrollment = enroll(db, current_user.id, body.course_id)
    except CourseNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e
    return EnrollmentResponse.model_validate(enrollment)


@router.get("/user", response_model=list[EnrollmentResponse])
def get_my_enrollments(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> list[EnrollmentResponse]:
    """Enrollments of the calling user, newest first, each with its course."""
    return [
        EnrollmentResponse.model_validate(e)
        for e in list_enrollments_for_user(db, current_user.id)
    ]

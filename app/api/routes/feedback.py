"""Course feedback endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.orm import Session

from app.api.deps import get_current_user
from app.core.database import get_db
from app.schemas.auth import CurrentUser, ErrorResponse
from app.schemas.courses import ID_MAX, FeedbackCreateRequest, FeedbackResponse
from app.services.courses import CourseNotFoundError
from app.services.feedback import list_feedback_for_course, submit_feedback

router = APIRouter()


@router.post(
    "",
    response_model=FeedbackResponse,
    status_code=status.HTTP_201_CREATED,
    responses={404: {"model": ErrorResponse}},
)
def post_feedback(
    body: FeedbackCreateRequest,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> FeedbackResponse:
    try:
        entry = submit_feedback(db, current_user.id, body.course_id, body.feedback)
    except CourseNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e
    return FeedbackResponse.model_validate(entry)


@router.get(
    "/course/{course_id}",
    response_model=list[FeedbackResponse],
    responses={404: {"model": ErrorResponse}},
)
def get_course_feedback(
    course_id: Annotated[int, Path(ge=1, le=ID_MAX)],
    db: Annotated[Session, Depends(get_db)],
) -> list[FeedbackResponse]:
    try:
        entries = list_feedback_for_course(db, course_id)
    except CourseNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e
    return [FeedbackResponse.model_validate(f) for f in entries]

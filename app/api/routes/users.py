"""Profile of the current user, and the admin user list."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.api.deps import get_current_user, require_admin
from app.core.database import get_db
from app.models.user import User
from app.schemas.auth import (
    CurrentUser,
    ErrorResponse,
    ProfileUpdateRequest,
    UserResponse,
    UsersListResponse,
)
from app.services.accounts import DuplicateEmailError, get_user, list_users, update_profile

router = APIRouter()


def _load_user(db: Session, current_user: CurrentUser) -> User:
    user = get_user(db, current_user.id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


@router.get("/profile", response_model=UserResponse)
def get_profile(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> UserResponse:
    return UserResponse.model_validate(_load_user(db, current_user))


@router.put(
    "/profile",
    response_model=UserResponse,
    responses={400: {"model": ErrorResponse}},
)
def put_profile(
    body: ProfileUpdateRequest,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> UserResponse:
    """Update fullName and/or email of the current user."""
    user = _load_user(db, current_user)
    try:
        user = update_profile(db, user, full_name=body.full_name, email=body.email)
    except DuplicateEmailError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e
    return UserResponse.model_validate(user)


@router.get("", response_model=UsersListResponse)
def get_users(
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> UsersListResponse:
    """List all users (admin only)."""
    return UsersListResponse(
        users=[UserResponse.model_validate(u) for u in list_users(db)]
    )

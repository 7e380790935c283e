"""Registration, login and token endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.security import create_access_token
from app.schemas.auth import (
    ErrorResponse,
    LoginRequest,
    RegisterRequest,
    TokenResponse,
    UserResponse,
)
from app.services.accounts import (
    DuplicateEmailError,
    DuplicateUsernameError,
    InvalidCredentialsError,
    authenticate_user,
    register_user,
)

router = APIRouter()


@router.post(
    "/register",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
def register(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
) -> UserResponse:
    """
    Create an account. The JSON field passwordHash carries the plain password;
    it is hashed before storage and never returned.
    """
    try:
        user = register_user(
            db,
            username=body.username,
            email=body.email,
            password=body.password_hash,
            full_name=body.full_name,
            role=body.role,
        )
    except (DuplicateUsernameError, DuplicateEmailError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e
    return UserResponse.model_validate(user)


@router.post(
    "/login",
    response_model=UserResponse,
    responses={401: {"model": ErrorResponse}},
)
def login(
    username: Annotated[str, Query(description="Username")],
    password: Annotated[str, Query(description="Password")],
    db: Annotated[Session, Depends(get_db)],
) -> UserResponse:
    """Check username and password (query parameters) and return the user record."""
    try:
        user = authenticate_user(db, username, password)
    except InvalidCredentialsError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.message) from e
    return UserResponse.model_validate(user)


@router.post(
    "/token",
    response_model=TokenResponse,
    responses={401: {"model": ErrorResponse}},
)
def issue_token(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
) -> TokenResponse:
    """
    Authenticate with username and password; returns a JWT access token.
    Include the token in the Authorization header as: Bearer <access_token>
    """
    try:
        user = authenticate_user(db, body.username, body.password)
    except InvalidCredentialsError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.message) from e
    token = create_access_token(sub=user.id, role=user.role)
    return TokenResponse(access_token=token, token_type="bearer")


@router.get("/test", response_class=PlainTextResponse)
def auth_test() -> str:
    return "Auth endpoint is working!"

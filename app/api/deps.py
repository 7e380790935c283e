"""Request-scoped auth context and the dependencies built on it."""

from dataclasses import dataclass
from typing import Annotated

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.security import ROLE_ADMIN, ROLE_INSTRUCTOR, decode_access_token
from app.schemas.auth import CurrentUser
from app.services.accounts import get_user

security = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class RequestContext:
    """
    Per-request auth state handed to route handlers.

    principal is None for anonymous requests; token_error records why a
    presented token was rejected so protected routes can report it.
    """

    principal: CurrentUser | None = None
    token_error: str | None = None


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_request_context(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> RequestContext:
    """Resolve the optional Bearer token into a RequestContext. Never raises for bad tokens."""
    if credentials is None:
        return RequestContext()
    try:
        payload = decode_access_token(credentials.credentials)
    except jwt.PyJWTError:
        return RequestContext(token_error="Invalid or expired token")
    sub = payload.get("sub")
    try:
        user_id = int(sub)
    except (TypeError, ValueError):
        return RequestContext(token_error="Invalid token payload")
    user = get_user(db, user_id)
    if user is None:
        return RequestContext(token_error="User not found")
    return RequestContext(principal=CurrentUser.model_validate(user))


def get_current_user(
    context: Annotated[RequestContext, Depends(get_request_context)],
) -> CurrentUser:
    """Dependency: require an authenticated principal. Raises 401 if missing or invalid."""
    if context.principal is None:
        raise _unauthorized(context.token_error or "Not authenticated")
    return context.principal


def require_admin(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> CurrentUser:
    """Dependency: require authenticated user with role 'admin'. Raises 403 for non-admin."""
    if current_user.role != ROLE_ADMIN:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return current_user


def require_instructor(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> CurrentUser:
    """Dependency: require an instructor or admin. Raises 403 otherwise."""
    if current_user.role not in (ROLE_INSTRUCTOR, ROLE_ADMIN):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Instructor access required",
        )
    return current_user

"""Smoke-test endpoints for clients checking connectivity and their token."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from app.api.deps import get_current_user
from app.schemas.auth import CurrentUser

router = APIRouter()


@router.get("/public", response_class=PlainTextResponse)
def public_endpoint() -> str:
    return "This is a public endpoint - no authentication required!"


@router.get("/protected", response_class=PlainTextResponse)
def protected_endpoint(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> str:
    return f"This is a protected endpoint! Hello, {current_user.username}"


@router.get("/user-info")
def user_info(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> dict[str, Any]:
    return {
        "username": current_user.username,
        "role": current_user.role,
        "authenticated": True,
    }

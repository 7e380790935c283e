"""API routes."""

from fastapi import APIRouter

from app.api.routes import auth, courses, enrollments, feedback, health, smoke, users

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(courses.router, prefix="/courses", tags=["courses"])
router.include_router(enrollments.router, prefix="/enrollments", tags=["enrollments"])
router.include_router(feedback.router, prefix="/feedback", tags=["feedback"])
router.include_router(smoke.router, prefix="/test", tags=["test"])

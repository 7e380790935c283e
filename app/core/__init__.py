"""Core plumbing: settings, database sessions, logging setup."""

from app.core.config import Settings, get_settings, settings
from app.core.database import SessionLocal, get_db
from app.core.logging_config import configure_logging

__all__ = [
    "Settings",
    "SessionLocal",
    "configure_logging",
    "get_db",
    "get_settings",
    "settings",
]

"""SQLAlchemy declarative Base with predictable constraint names for migrations."""

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

# Matches the names used in alembic/versions (ix_users_username, ...).
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
}


class Base(DeclarativeBase):
    """Declarative base for users, courses, enrollments and feedback."""

    metadata = MetaData(naming_convention=NAMING_CONVENTION)

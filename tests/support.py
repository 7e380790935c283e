"""Shared test helpers: in-memory SQLite database and an API client wired to it."""

import unittest
from unittest.mock import patch

from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import get_db
from app.core.security import create_access_token
from app.main import app
from app.models import Base
from app.services.accounts import register_user

# Low bcrypt cost keeps the suite fast; verification works for any cost.
TEST_BCRYPT_ROUNDS = 4


def make_session_factory() -> tuple[Engine, sessionmaker]:
    """Fresh in-memory SQLite database with all tables and foreign keys enforced."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, _record) -> None:
        dbapi_connection.execute("PRAGMA foreign_keys=ON")

    Base.metadata.create_all(engine)
    return engine, sessionmaker(autocommit=False, autoflush=False, bind=engine)


class DatabaseTestCase(unittest.TestCase):
    """TestCase with a private in-memory database and cheap password hashing."""

    def setUp(self) -> None:
        rounds_patch = patch("app.core.security.BCRYPT_ROUNDS", TEST_BCRYPT_ROUNDS)
        rounds_patch.start()
        self.addCleanup(rounds_patch.stop)
        self.engine, self.SessionLocal = make_session_factory()
        self.addCleanup(self.engine.dispose)
        self.db: Session = self.SessionLocal()
        self.addCleanup(self.db.close)

    def create_user(
        self,
        username: str,
        role: str = "student",
        password: str = "secret123",
        email: str | None = None,
    ):
        """Insert a user through the service (any role, including admin)."""
        return register_user(
            self.db,
            username=username,
            email=email or f"{username}@school.org",
            password=password,
            role=role,
        )


class ApiTestCase(DatabaseTestCase):
    """DatabaseTestCase plus a TestClient whose get_db uses the test database."""

    def setUp(self) -> None:
        super().setUp()

        def override_get_db():
            db = self.SessionLocal()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        self.addCleanup(app.dependency_overrides.clear)
        self.client = TestClient(app)

    def register(
        self,
        username: str = "alice",
        email: str = "a@x.com",
        password: str = "secret123",
        **extra: object,
    ):
        body = {"username": username, "email": email, "passwordHash": password}
        body.update(extra)
        return self.client.post("/api/auth/register", json=body)

    def login(self, username: str, password: str):
        return self.client.post(
            "/api/auth/login",
            params={"username": username, "password": password},
        )

    def auth_headers(self, user) -> dict[str, str]:
        token = create_access_token(sub=user.id, role=user.role)
        return {"Authorization": f"Bearer {token}"}

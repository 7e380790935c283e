"""Registration and authentication: uniqueness checks, password hashing, credential verification."""

import logging

from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.orm import Session

from app.core.security import hash_password, verify_password
from app.models.user import User

logger = logging.getLogger(__name__)

DUPLICATE_USERNAME_MESSAGE = "Username already exists"
DUPLICATE_EMAIL_MESSAGE = "Email already exists"
INVALID_CREDENTIALS_MESSAGE = "Invalid username or password"
STORE_UNAVAILABLE_MESSAGE = "User store is unavailable. Try again later."

# Compared against when the username is unknown so both failure paths cost one bcrypt check.
_DUMMY_HASH = hash_password("not-a-real-password")


class AccountError(Exception):
    """Base class for account errors; message is safe to show to clients."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class DuplicateUsernameError(AccountError):
    """Raised when registering a username that is already taken."""

    def __init__(self) -> None:
        super().__init__(DUPLICATE_USERNAME_MESSAGE)


class DuplicateEmailError(AccountError):
    """Raised when registering (or changing to) an email that is already taken."""

    def __init__(self) -> None:
        super().__init__(DUPLICATE_EMAIL_MESSAGE)


class InvalidCredentialsError(AccountError):
    """Raised on failed login. Unknown user and wrong password are indistinguishable."""

    def __init__(self) -> None:
        super().__init__(INVALID_CREDENTIALS_MESSAGE)


class StoreUnavailableError(Exception):
    """Raised when the database cannot be reached. Not retried here."""

    def __init__(self, message: str = STORE_UNAVAILABLE_MESSAGE, cause: Exception | None = None) -> None:
        self.message = message
        self.cause = cause
        super().__init__(message)


def get_user_by_username(db: Session, username: str) -> User | None:
    return db.query(User).filter(User.username == username).first()


def get_user_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == email).first()


def get_user(db: Session, user_id: int) -> User | None:
    return db.query(User).filter(User.id == user_id).first()


def list_users(db: Session) -> list[User]:
    return db.query(User).order_by(User.id).all()


def _duplicate_error_for(db: Session, username: str | None, email: str | None, exc: IntegrityError) -> AccountError:
    """
    Work out which unique constraint an IntegrityError came from.

    The conflicting row has been committed by the time the violation is raised,
    so a fresh lookup sees it. Fall back to the driver message otherwise.
    """
    if username is not None and get_user_by_username(db, username) is not None:
        return DuplicateUsernameError()
    if email is not None and get_user_by_email(db, email) is not None:
        return DuplicateEmailError()
    detail = str(exc.orig).lower()
    if "email" in detail:
        return DuplicateEmailError()
    if "username" in detail:
        return DuplicateUsernameError()
    raise exc


def register_user(
    db: Session,
    *,
    username: str,
    email: str,
    password: str,
    full_name: str | None = None,
    role: str = "student",
) -> User:
    """
    Create a user after checking username and email are free.

    The pre-checks give the common case a clear error; the unique constraints
    on users.username and users.email decide concurrent races. Raises
    DuplicateUsernameError, DuplicateEmailError or StoreUnavailableError.
    """
    try:
        if get_user_by_username(db, username) is not None:
            raise DuplicateUsernameError()
        if get_user_by_email(db, email) is not None:
            raise DuplicateEmailError()

        user = User(
            username=username,
            email=email,
            password_hash=hash_password(password),
            full_name=full_name,
            role=role,
        )
        db.add(user)
        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            logger.info(
                "Registration lost a uniqueness race",
                extra={"username": username},
            )
            raise _duplicate_error_for(db, username, email, e) from e
        db.refresh(user)
    except OperationalError as e:
        db.rollback()
        logger.error("User store unavailable during registration", exc_info=True)
        raise StoreUnavailableError(cause=e) from e

    logger.info(
        "User registered",
        extra={"user_id": user.id, "username": user.username, "role": user.role},
    )
    return user


def authenticate_user(db: Session, username: str, password: str) -> User:
    """
    Return the user if the password matches its stored hash.

    Raises InvalidCredentialsError for unknown users and wrong passwords alike.
    """
    try:
        user = get_user_by_username(db, username)
    except OperationalError as e:
        logger.error("User store unavailable during login", exc_info=True)
        raise StoreUnavailableError(cause=e) from e

    if user is None:
        verify_password(password, _DUMMY_HASH)
        logger.info("Login failed", extra={"reason": "unknown_user"})
        raise InvalidCredentialsError()
    if not verify_password(password, user.password_hash):
        logger.info("Login failed", extra={"reason": "bad_password", "user_id": user.id})
        raise InvalidCredentialsError()
    return user


def update_profile(
    db: Session,
    user: User,
    *,
    full_name: str | None = None,
    email: str | None = None,
) -> User:
    """Update full name and/or email. An email already used by another user raises DuplicateEmailError."""
    try:
        if email is not None and email != user.email:
            other = get_user_by_email(db, email)
            if other is not None and other.id != user.id:
                raise DuplicateEmailError()
            user.email = email
        if full_name is not None:
            user.full_name = full_name.strip() or None
        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            raise DuplicateEmailError() from e
        db.refresh(user)
    except OperationalError as e:
        db.rollback()
        raise StoreUnavailableError(cause=e) from e
    return user

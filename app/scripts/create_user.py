"""
Create a user (e.g. the first admin). Run from project root:
  python -m app.scripts.create_user USERNAME EMAIL PASSWORD [role]
Example:
  python -m app.scripts.create_user admin admin@school.org your-secure-password admin
"""
import argparse
import logging
import sys

from pydantic import EmailStr, TypeAdapter, ValidationError

from app.core.config import get_settings
from app.core.database import SessionLocal
from app.core.logging_config import configure_logging
from app.core.security import (
    EMAIL_MAX_LEN,
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    USER_ROLES,
    USERNAME_MAX_LEN,
)
from app.services.accounts import AccountError, StoreUnavailableError, register_user

logger = logging.getLogger(__name__)

_email_adapter = TypeAdapter(EmailStr)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a CourseHub user (any role, including admin).")
    parser.add_argument("username", help=f"Username (1-{USERNAME_MAX_LEN} chars)")
    parser.add_argument("email", help="Email address")
    parser.add_argument("password", help=f"Password ({PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} chars)")
    parser.add_argument("role", nargs="?", default="student", choices=list(USER_ROLES))
    parser.add_argument("--full-name", default=None, help="Display name")
    args = parser.parse_args(argv)

    configure_logging(get_settings().LOG_LEVEL)

    username = args.username.strip()
    if not username or len(username) > USERNAME_MAX_LEN:
        print("Invalid username length.", file=sys.stderr)
        return 1
    try:
        # Same normalization as the register endpoint, so both paths store one form.
        email = _email_adapter.validate_python(args.email.strip())
    except ValidationError:
        print("Invalid email address.", file=sys.stderr)
        return 1
    if len(email) > EMAIL_MAX_LEN:
        print(f"Email must be at most {EMAIL_MAX_LEN} characters.", file=sys.stderr)
        return 1
    if len(args.password) < PASSWORD_MIN_LEN or len(args.password) > PASSWORD_MAX_LEN:
        print(f"Password must be {PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} characters.", file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        register_user(
            db,
            username=username,
            email=email,
            password=args.password,
            full_name=args.full_name,
            role=args.role,
        )
    except AccountError as e:
        print(e.message, file=sys.stderr)
        return 1
    except StoreUnavailableError as e:
        logger.error("Could not create user: %s", e.message)
        return 1
    finally:
        db.close()
    print(f"Created user '{username}' with role '{args.role}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Unit tests for app.core.security: bcrypt hashing and JWT round trips."""

import unittest
from datetime import UTC, datetime, timedelta
from unittest.mock import patch

import jwt

from app.core.config import settings
from app.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


class TestPasswordHashing(unittest.TestCase):
    """hash_password never returns the plaintext and verify_password checks it."""

    def setUp(self) -> None:
        rounds_patch = patch("app.core.security.BCRYPT_ROUNDS", 4)
        rounds_patch.start()
        self.addCleanup(rounds_patch.stop)

    def test_hash_is_not_plaintext(self) -> None:
        hashed = hash_password("secret123")
        self.assertNotEqual(hashed, "secret123")
        self.assertTrue(hashed.startswith("$2"))

    def test_same_password_gets_different_salts(self) -> None:
        self.assertNotEqual(hash_password("secret123"), hash_password("secret123"))

    def test_verify_correct_and_wrong(self) -> None:
        hashed = hash_password("secret123")
        self.assertTrue(verify_password("secret123", hashed))
        self.assertFalse(verify_password("secret124", hashed))

    def test_verify_malformed_hash_returns_false(self) -> None:
        self.assertFalse(verify_password("secret123", "not-a-bcrypt-hash"))

    def test_only_first_72_bytes_count(self) -> None:
        base = "x" * 72
        hashed = hash_password(base + "tail-one")
        self.assertTrue(verify_password(base + "tail-two", hashed))


class TestAccessTokens(unittest.TestCase):
    """create_access_token / decode_access_token round trip and rejection cases."""

    def test_round_trip(self) -> None:
        token = create_access_token(sub=42, role="instructor")
        payload = decode_access_token(token)
        self.assertEqual(payload["sub"], "42")
        self.assertEqual(payload["role"], "instructor")
        self.assertIn("exp", payload)

    def test_tampered_token_rejected(self) -> None:
        token = create_access_token(sub=1, role="student")
        with self.assertRaises(jwt.PyJWTError):
            decode_access_token(token[:-2] + ("AA" if token[-2:] != "AA" else "BB"))

    def test_wrong_secret_rejected(self) -> None:
        token = jwt.encode(
            {"sub": "1", "role": "admin"},
            "some-other-secret",
            algorithm=settings.JWT_ALGORITHM,
        )
        with self.assertRaises(jwt.PyJWTError):
            decode_access_token(token)

    def test_expired_token_rejected(self) -> None:
        past = datetime.now(UTC) - timedelta(minutes=5)
        token = jwt.encode(
            {"sub": "1", "role": "student", "exp": past, "iat": past - timedelta(minutes=1)},
            settings.JWT_SECRET.get_secret_value(),
            algorithm=settings.JWT_ALGORITHM,
        )
        with self.assertRaises(jwt.ExpiredSignatureError):
            decode_access_token(token)


if __name__ == "__main__":
    unittest.main()

"""Unit tests for journal.core.security: bcrypt hashing and signed session cookies."""

import unittest
from unittest.mock import MagicMock

import jwt
from pydantic import SecretStr

from journal.core.security import (
    hash_password,
    new_session_id,
    read_session_cookie,
    sign_session_cookie,
    verify_password,
)


def _settings(secret: str = "test-secret", expire_minutes: int = 60) -> MagicMock:
    settings = MagicMock()
    settings.SESSION_SECRET = SecretStr(secret)
    settings.SESSION_ALGORITHM = "HS256"
    settings.SESSION_EXPIRE_MINUTES = expire_minutes
    return settings


class TestPasswordHashing(unittest.TestCase):
    """hash_password never stores plaintext and verify_password checks it."""

    def test_hash_is_not_plaintext(self) -> None:
        hashed = hash_password("admin123")
        self.assertNotEqual(hashed, "admin123")
        self.assertTrue(hashed.startswith("$2b$10$"))

    def test_same_password_hashes_differently(self) -> None:
        self.assertNotEqual(hash_password("user123"), hash_password("user123"))

    def test_verify_correct_and_wrong(self) -> None:
        hashed = hash_password("user123")
        self.assertTrue(verify_password("user123", hashed))
        self.assertFalse(verify_password("user124", hashed))

    def test_verify_against_garbage_hash(self) -> None:
        self.assertFalse(verify_password("user123", "not-a-bcrypt-hash"))


class TestSessionCookie(unittest.TestCase):
    """Session ids round-trip through the cookie only with the right secret."""

    def test_read_returns_session_id(self) -> None:
        settings = _settings()
        sid = new_session_id()
        cookie = sign_session_cookie(sid, settings)
        self.assertEqual(read_session_cookie(cookie, settings), sid)

    def test_session_ids_are_unique(self) -> None:
        self.assertNotEqual(new_session_id(), new_session_id())

    def test_wrong_secret_rejected(self) -> None:
        cookie = sign_session_cookie(new_session_id(), _settings(secret="one"))
        with self.assertRaises(jwt.PyJWTError):
            read_session_cookie(cookie, _settings(secret="two"))

    def test_expired_cookie_rejected(self) -> None:
        settings = _settings(expire_minutes=-1)
        cookie = sign_session_cookie(new_session_id(), settings)
        with self.assertRaises(jwt.ExpiredSignatureError):
            read_session_cookie(cookie, settings)

    def test_token_without_sid_rejected(self) -> None:
        settings = _settings()
        token = jwt.encode({"sub": "someone", "exp": 4102444800}, "test-secret", algorithm="HS256")
        with self.assertRaises(jwt.PyJWTError):
            read_session_cookie(token, settings)

    def test_garbage_rejected(self) -> None:
        with self.assertRaises(jwt.PyJWTError):
            read_session_cookie("garbage", _settings())


if __name__ == "__main__":
    unittest.main()

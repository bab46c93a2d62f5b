"""Password hashing and signed session cookies."""

import secrets
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

import bcrypt
import jwt

if TYPE_CHECKING:
    from journal.core.config import Settings

# Fixed bcrypt cost for every stored password.
BCRYPT_ROUNDS = 10

USERNAME_MIN_LEN = 1
USERNAME_MAX_LEN = 255
PASSWORD_MIN_LEN = 1


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors.
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def new_session_id() -> str:
    """Opaque random identifier for a server-side session record."""
    return secrets.token_urlsafe(32)


def sign_session_cookie(session_id: str, settings: "Settings") -> str:
    """Wrap a session id in a signed token suitable for a cookie value."""
    now = datetime.now(UTC)
    payload: dict[str, Any] = {
        "sid": session_id,
        "iat": now,
        "exp": now + timedelta(minutes=settings.SESSION_EXPIRE_MINUTES),
    }
    return jwt.encode(
        payload,
        settings.SESSION_SECRET.get_secret_value(),
        algorithm=settings.SESSION_ALGORITHM,
    )


def read_session_cookie(cookie_value: str, settings: "Settings") -> str:
    """
    Verify a cookie value and return the session id it carries.
    Raises jwt.PyJWTError on a bad signature, expired token or missing sid.
    """
    payload = jwt.decode(
        cookie_value,
        settings.SESSION_SECRET.get_secret_value(),
        algorithms=[settings.SESSION_ALGORITHM],
        options={"require": ["sid", "exp"]},
    )
    sid = payload.get("sid")
    if not isinstance(sid, str) or not sid:
        raise jwt.InvalidTokenError("Session id missing from cookie")
    return sid

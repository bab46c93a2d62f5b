"""Server-side session records referenced by a signed cookie."""

import logging
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING

import jwt
from sqlalchemy.orm import Session

from journal.core.security import new_session_id, read_session_cookie, sign_session_cookie
from journal.models.session import UserSession
from journal.schemas.auth import SessionView

if TYPE_CHECKING:
    from journal.core.config import Settings

logger = logging.getLogger(__name__)

ANONYMOUS = SessionView()


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes; they were written as UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def start_session(db: Session, identity: SessionView, settings: "Settings") -> str:
    """Persist a session for a logged-in identity and return the signed cookie value."""
    now = datetime.now(timezone.utc)
    record = UserSession(
        id=new_session_id(),
        user_id=identity.user_id,
        username=identity.username,
        role=identity.role,
        created_at=now,
        expires_at=now + timedelta(minutes=settings.SESSION_EXPIRE_MINUTES),
    )
    db.add(record)
    db.commit()
    return sign_session_cookie(record.id, settings)


def _lookup(db: Session, cookie_value: str | None, settings: "Settings") -> UserSession | None:
    if not cookie_value:
        return None
    try:
        session_id = read_session_cookie(cookie_value, settings)
    except jwt.PyJWTError:
        return None
    record = db.get(UserSession, session_id)
    if record is None:
        return None
    if _as_utc(record.expires_at) <= datetime.now(timezone.utc):
        return None
    return record


def resolve_session(db: Session, cookie_value: str | None, settings: "Settings") -> SessionView:
    """Return the identity behind a cookie, or an anonymous view if it does not check out."""
    record = _lookup(db, cookie_value, settings)
    if record is None:
        return ANONYMOUS
    return SessionView(user_id=record.user_id, username=record.username, role=record.role)


def end_session(db: Session, cookie_value: str | None, settings: "Settings") -> None:
    """Delete the session behind a cookie. No-op when the cookie does not resolve."""
    record = _lookup(db, cookie_value, settings)
    if record is None:
        return
    username = record.username
    db.delete(record)
    db.commit()
    logger.info("Session ended for %s", username)


def purge_expired_sessions(db: Session, now: datetime | None = None) -> int:
    """
    Delete session records whose expiry has passed.

    Returns the number of records deleted. Idempotent: safe to run repeatedly.
    """
    cutoff = now or datetime.now(timezone.utc)
    deleted_count = (
        db.query(UserSession)
        .filter(UserSession.expires_at <= cutoff)
        .delete(synchronize_session=False)
    )
    db.commit()
    if deleted_count > 0:
        logger.info(
            "Session purge: cutoff=%s, sessions_deleted=%s",
            cutoff.isoformat(),
            deleted_count,
        )
    return deleted_count

"""ORM model for server-side login sessions."""

from sqlalchemy import Column, DateTime, String

from journal.models.base import Base


class UserSession(Base):
    """
    Session record referenced by the signed cookie.

    user_id, username and role are a snapshot taken at login; they are not
    refreshed from the users table while the session lives.
    """

    __tablename__ = "sessions"

    id = Column(String(64), primary_key=True)
    user_id = Column(String(32), nullable=False, index=True)
    username = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)
    expires_at = Column(DateTime(timezone=True), nullable=False, index=True)

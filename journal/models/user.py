"""ORM model for blog accounts (login and roles)."""

from sqlalchemy import Column, String

from journal.models.base import Base, new_id

ROLE_ADMIN = "admin"
ROLE_USER = "user"
ROLES = (ROLE_ADMIN, ROLE_USER)


class User(Base):
    """
    Blog account used for session login and admin moderation.

    role: 'admin' or 'user'
    """

    __tablename__ = "users"

    id = Column(String(32), primary_key=True, default=new_id)
    username = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False, default=ROLE_USER)

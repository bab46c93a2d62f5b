"""SQLAlchemy ORM models."""

from journal.models.base import Base
from journal.models.post import Post
from journal.models.session import UserSession
from journal.models.user import User

__all__ = ["Base", "Post", "User", "UserSession"]

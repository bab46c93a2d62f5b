"""ORM model for blog posts."""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, String, Text

from journal.models.base import Base, new_id


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Post(Base):
    """A published post. Not attributed to an author."""

    __tablename__ = "posts"

    id = Column(String(32), primary_key=True, default=new_id)
    title = Column(String(1024), nullable=False, default="")
    content = Column(Text, nullable=False, default="")
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        index=True,
    )

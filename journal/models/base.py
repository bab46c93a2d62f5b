"""SQLAlchemy declarative Base and shared model helpers."""

import uuid

from sqlalchemy.orm import DeclarativeBase


def new_id() -> str:
    """Store-assigned opaque identifier for users and posts."""
    return uuid.uuid4().hex


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""

    pass

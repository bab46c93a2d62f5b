"""Core app configuration and database."""

from journal.core.config import get_settings, settings
from journal.core.database import get_db

__all__ = ["get_settings", "settings", "get_db"]

"""Pydantic form, session and response schemas."""

from journal.schemas.auth import RegistrationForm, SessionView
from journal.schemas.health import HealthResponse

__all__ = [
    "HealthResponse",
    "RegistrationForm",
    "SessionView",
]

"""Registration form and per-request session schemas."""

from pydantic import BaseModel, Field, field_validator

from journal.core.security import (
    PASSWORD_MIN_LEN,
    USERNAME_MAX_LEN,
    USERNAME_MIN_LEN,
)
from journal.models.user import ROLE_ADMIN, ROLE_USER, ROLES


class RegistrationForm(BaseModel):
    """Fields posted by the registration form."""

    username: str = Field(..., min_length=USERNAME_MIN_LEN, max_length=USERNAME_MAX_LEN)
    password: str = Field(..., min_length=PASSWORD_MIN_LEN)
    role: str = ROLE_USER

    @field_validator("role", mode="before")
    @classmethod
    def default_unknown_role(cls, v: object) -> str:
        # Anything other than a known role registers a plain user
        return v if v in ROLES else ROLE_USER


class SessionView(BaseModel):
    """
    Identity attached to the current request.

    Anonymous visitors get a view with user_id=None. The fields are a
    snapshot copied at login, never re-read from the users table.
    """

    model_config = {"frozen": True}

    user_id: str | None = None
    username: str | None = None
    role: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None

    @property
    def is_admin(self) -> bool:
        return self.is_authenticated and self.role == ROLE_ADMIN

"""Request dependencies: current session resolution and the auth/admin guards."""

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from journal.core.config import Settings, get_settings
from journal.core.database import get_db
from journal.schemas.auth import SessionView
from journal.services.sessions import resolve_session

LOGIN_PATH = "/login"


class LoginRequired(Exception):
    """Raised by a guard; the app turns it into a redirect to the login page."""


def get_current_session(
    request: Request,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> SessionView:
    """Dependency: identity behind the session cookie, anonymous if there is none."""
    cookie_value = request.cookies.get(settings.SESSION_COOKIE_NAME)
    return resolve_session(db, cookie_value, settings)


def require_auth(
    session: Annotated[SessionView, Depends(get_current_session)],
) -> SessionView:
    """Dependency: any logged-in session. Redirects to /login otherwise."""
    if not session.is_authenticated:
        raise LoginRequired()
    return session


def require_admin(
    session: Annotated[SessionView, Depends(get_current_session)],
) -> SessionView:
    """Dependency: logged-in session with role 'admin'. Redirects to /login otherwise."""
    if not session.is_admin:
        raise LoginRequired()
    return session


CurrentSession = Annotated[SessionView, Depends(get_current_session)]
AuthSession = Annotated[SessionView, Depends(require_auth)]
AdminSession = Annotated[SessionView, Depends(require_admin)]
DbSession = Annotated[Session, Depends(get_db)]
AppSettings = Annotated[Settings, Depends(get_settings)]

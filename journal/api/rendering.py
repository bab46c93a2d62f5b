"""Jinja2 page rendering. Templates get the payload plus the session view as `user`."""

from pathlib import Path
from typing import Any

from fastapi import Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from journal.schemas.auth import SessionView

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render(
    request: Request,
    page: str,
    user: SessionView,
    **payload: Any,
) -> HTMLResponse:
    """Render templates/<page>.html with the given payload."""
    context = {"user": user, **payload}
    return templates.TemplateResponse(request, f"{page}.html", context)


def redirect(url: str) -> RedirectResponse:
    """303 so browsers follow a form POST with a GET."""
    return RedirectResponse(url, status_code=status.HTTP_303_SEE_OTHER)

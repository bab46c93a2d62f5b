"""Login, logout, registration and profile pages."""

import logging
from typing import Annotated

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse, Response
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from journal.api.deps import AppSettings, AuthSession, CurrentSession, DbSession
from journal.api.rendering import redirect, render
from journal.schemas.auth import RegistrationForm
from journal.services.accounts import authenticate, register
from journal.services.errors import InvalidCredentials, ServiceError
from journal.services.sessions import end_session, start_session

logger = logging.getLogger(__name__)

router = APIRouter()

REGISTRATION_SUCCESS = "User registered successfully! You can now login."
REGISTRATION_FAILED = "Registration failed. Username might already exist."
LOGIN_FAILED = "Login failed"


@router.get("/login", response_class=HTMLResponse)
def login_form(request: Request, user: CurrentSession) -> HTMLResponse:
    return render(request, "login", user)


@router.post("/login", response_class=HTMLResponse)
def login(
    request: Request,
    db: DbSession,
    settings: AppSettings,
    user: CurrentSession,
    username: Annotated[str, Form()] = "",
    password: Annotated[str, Form()] = "",
) -> Response:
    """
    Check credentials; on success store a session and set the cookie.
    Unknown user and wrong password re-render the form with the same message.
    """
    try:
        identity = authenticate(db, username, password)
        cookie_value = start_session(db, identity, settings)
    except InvalidCredentials as e:
        logger.info("Failed login for %s", username)
        return render(request, "login", user, error=e.message)
    except SQLAlchemyError as e:
        logger.error("Login error: %s", e)
        return render(request, "login", user, error=LOGIN_FAILED)

    logger.info("User %s logged in", identity.username)
    response = redirect("/")
    response.set_cookie(
        settings.SESSION_COOKIE_NAME,
        cookie_value,
        max_age=settings.SESSION_EXPIRE_MINUTES * 60,
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax",
    )
    return response


@router.get("/logout")
def logout(request: Request, db: DbSession, settings: AppSettings) -> Response:
    end_session(db, request.cookies.get(settings.SESSION_COOKIE_NAME), settings)
    response = redirect("/")
    response.delete_cookie(
        settings.SESSION_COOKIE_NAME,
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax",
    )
    return response


@router.get("/register", response_class=HTMLResponse)
def register_form(request: Request, user: CurrentSession) -> HTMLResponse:
    return render(request, "register", user)


@router.post("/register", response_class=HTMLResponse)
def register_user(
    request: Request,
    db: DbSession,
    user: CurrentSession,
    username: Annotated[str, Form()] = "",
    password: Annotated[str, Form()] = "",
    role: Annotated[str, Form()] = "",
) -> HTMLResponse:
    """Create an account and re-render the form with a success or error message."""
    try:
        form = RegistrationForm(username=username, password=password, role=role)
        register(db, form.username, form.password, form.role)
    except (ValidationError, ServiceError, SQLAlchemyError) as e:
        logger.error("Registration error: %s", e)
        return render(request, "register", user, error=REGISTRATION_FAILED)
    return render(request, "register", user, success=REGISTRATION_SUCCESS)


@router.get("/profile", response_class=HTMLResponse)
def profile(request: Request, user: AuthSession) -> HTMLResponse:
    return render(request, "profile", user)

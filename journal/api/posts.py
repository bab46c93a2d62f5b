"""Post pages: compose (any logged-in user), read (anyone), moderate (admins)."""

import logging
from typing import Annotated

from fastapi import APIRouter, Form, Request, status
from fastapi.responses import HTMLResponse, PlainTextResponse, Response

from journal.api.deps import AdminSession, AuthSession, CurrentSession, DbSession
from journal.api.rendering import redirect, render
from journal.services.errors import PostNotFound, StoreFailure
from journal.services.posts import (
    create_post,
    delete_post,
    get_post,
    list_posts,
    update_post,
)

logger = logging.getLogger(__name__)

router = APIRouter()

PostTitle = Annotated[str, Form(alias="postTitle")]
PostBody = Annotated[str, Form(alias="postBody")]


def _not_found(e: PostNotFound) -> PlainTextResponse:
    return PlainTextResponse(e.message, status_code=status.HTTP_404_NOT_FOUND)


def _store_failure(e: StoreFailure) -> PlainTextResponse:
    logger.error("%s: %s", e.message, e.cause)
    return PlainTextResponse(e.message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


@router.get("/compose", response_class=HTMLResponse)
def compose_form(request: Request, user: AuthSession) -> HTMLResponse:
    return render(request, "compose", user)


@router.post("/compose")
def compose(
    db: DbSession,
    _user: AuthSession,
    title: PostTitle = "",
    content: PostBody = "",
) -> Response:
    try:
        create_post(db, title, content)
    except StoreFailure as e:
        return _store_failure(e)
    return redirect("/")


@router.get("/admin", response_class=HTMLResponse)
def admin_dashboard(request: Request, db: DbSession, user: AdminSession) -> HTMLResponse:
    """All posts, newest first, with edit and delete controls."""
    return render(request, "admin", user, posts=list_posts(db, newest_first=True))


@router.get("/posts/{post_id}", response_class=HTMLResponse)
def show_post(request: Request, post_id: str, db: DbSession, user: CurrentSession) -> Response:
    try:
        post = get_post(db, post_id)
    except PostNotFound as e:
        return _not_found(e)
    except StoreFailure as e:
        return _store_failure(e)
    return render(request, "post", user, post=post)


@router.post("/posts/{post_id}/delete")
def remove_post(post_id: str, db: DbSession, _user: AdminSession) -> Response:
    try:
        delete_post(db, post_id)
    except PostNotFound as e:
        return _not_found(e)
    except StoreFailure as e:
        return _store_failure(e)
    return redirect("/admin")


@router.get("/posts/{post_id}/edit", response_class=HTMLResponse)
def edit_form(request: Request, post_id: str, db: DbSession, user: AdminSession) -> Response:
    try:
        post = get_post(db, post_id)
    except PostNotFound as e:
        return _not_found(e)
    except StoreFailure as e:
        return _store_failure(e)
    return render(request, "edit", user, post=post)


@router.post("/posts/{post_id}/edit")
def edit_post(
    post_id: str,
    db: DbSession,
    _user: AdminSession,
    title: PostTitle = "",
    content: PostBody = "",
) -> Response:
    try:
        update_post(db, post_id, title, content)
    except PostNotFound as e:
        return _not_found(e)
    except StoreFailure as e:
        return _store_failure(e)
    return redirect("/admin")

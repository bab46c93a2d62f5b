"""HTML routes plus the JSON health check."""

from fastapi import APIRouter

from journal.api import auth, health, pages, posts

router = APIRouter()
router.include_router(pages.router, tags=["pages"])
router.include_router(auth.router, tags=["auth"])
router.include_router(posts.router, tags=["posts"])
router.include_router(health.router, tags=["health"])

"""FastAPI application entrypoint. No business logic; only wiring, startup and shutdown."""

from dotenv import load_dotenv

load_dotenv()

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import RedirectResponse

from journal.api import router
from journal.api.deps import LOGIN_PATH, LoginRequired
from journal.api.rendering import redirect
from journal.core.config import settings
from journal.core.database import SessionLocal, engine
from journal.models import Base
from journal.services.accounts import ensure_demo_users

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def _seed_demo_users() -> None:
    db = SessionLocal()
    try:
        ensure_demo_users(db)
    except Exception as e:
        logger.exception("Error creating demo users: %s", e)
    finally:
        db.close()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create tables and demo accounts on startup; release the pool on shutdown."""
    if settings.AUTO_CREATE_TABLES:
        Base.metadata.create_all(bind=engine)
    if settings.SEED_DEMO_USERS:
        _seed_demo_users()
    try:
        yield
    finally:
        engine.dispose()


def create_app() -> FastAPI:
    application = FastAPI(
        title="Journal",
        version="0.1.0",
        debug=settings.DEBUG,
        lifespan=lifespan,
        docs_url="/docs" if settings.APP_ENV == "dev" else None,
        redoc_url=None,
    )

    @application.exception_handler(LoginRequired)
    async def login_required_handler(request: Request, exc: LoginRequired) -> RedirectResponse:
        return redirect(LOGIN_PATH)

    application.include_router(router)
    return application


app = create_app()


def run() -> None:
    """Serve the app with uvicorn on HOST:PORT."""
    logger.info("Server starting on port %s", settings.PORT)
    uvicorn.run("journal.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()

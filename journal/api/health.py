"""Health check endpoint with a database connectivity probe."""

from fastapi import APIRouter

from journal.api.deps import AppSettings, DbSession
from journal.core.database import check_db_connected
from journal.schemas.health import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def get_health(db: DbSession, settings: AppSettings) -> HealthResponse:
    """Used by load balancers and monitoring."""
    db_status = "connected" if check_db_connected(db) else "disconnected"
    return HealthResponse(environment=settings.APP_ENV, database=db_status)

"""Schema for the health check response."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Liveness plus a database round-trip result."""

    status: Literal["ok"] = Field(default="ok", description="Process is serving requests")
    environment: str = Field(description="APP_ENV the process was started with")
    database: Literal["connected", "disconnected"] = Field(
        description="Whether SELECT 1 succeeded against DATABASE_URL",
    )

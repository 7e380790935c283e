"""Pydantic schema for the health check response."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Liveness plus database reachability, for load balancers and uptime checks."""

    status: Literal["ok", "degraded"] = Field(
        default="ok",
        description="'degraded' when the API is up but the database is not reachable",
    )
    environment: str = Field(description="Current app environment (dev or prod)")
    version: str = Field(description="API version string")
    database: Literal["connected", "disconnected"] = Field(
        description="Result of a SELECT 1 against the configured database",
    )

"""
Health check API schemas.
"""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Liveness response."""

    status: str = Field(default="ok")
    service: str = Field(..., description="Service name")
    timestamp: str = Field(..., description="ISO 8601 timestamp")

"""
Health check API routes.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, status

from serrurier.presentation.schemas.health_schemas import HealthResponse

router = APIRouter(tags=["Health"])

SERVICE_NAME = "Web3 Authentication"


@router.get("/ping", response_model=HealthResponse, include_in_schema=False)
@router.get("/health", response_model=HealthResponse, status_code=status.HTTP_200_OK)
async def health_check() -> HealthResponse:
    """Liveness probe; does not call the identity store."""
    return HealthResponse(
        status="ok",
        service=SERVICE_NAME,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )

"""Health check endpoint for load balancers and monitoring."""

import time
from datetime import UTC, datetime

from fastapi import APIRouter, Request

from gatekeeper.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health(request: Request) -> HealthResponse:
    """Return service status, server time, and process uptime in seconds."""
    return HealthResponse(
        status="OK",
        timestamp=datetime.now(UTC),
        uptime=time.monotonic() - request.app.state.started_at,
    )

"""Health check routes."""

import time
from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from blog.application.usecase.base import APIModel
from blog.config import APP_VERSION, Settings

router = APIRouter(tags=["health"], route_class=DishkaRoute)

_started_at = time.monotonic()


class HealthResponse(APIModel):
    """Health check response."""

    status: str
    timestamp: datetime
    uptime: float  # Seconds since the process started serving
    environment: str
    version: str
    git_sha: str


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Basic health check endpoint.

    Returns:
        Health status indicating the service is running
    """
    return HealthResponse(
        status="OK",
        timestamp=datetime.now(),
        uptime=round(time.monotonic() - _started_at, 3),
        environment=settings.environment,
        version=APP_VERSION,
        git_sha=settings.git_sha,
    )

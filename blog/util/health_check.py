"""External health check of a running API.

Used by ``scripts/health_check.py`` from cron or a container healthcheck.
It only talks HTTP, so it checks what a client would see: the health route
answers and a post listing (which needs the database) succeeds.
"""

from datetime import datetime, timezone
from typing import Any

import httpx

SERVICE_NAME = "Blog API"
DEFAULT_TIMEOUT = 10.0


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class HealthChecker:
    """Runs the checks against one API base URL."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        """Initialize health checker.

        Args:
            client: Client whose ``base_url`` is the API to check
        """
        self.client = client

    async def check_health(self) -> dict[str, Any]:
        """Call the health route."""
        try:
            response = await self.client.get("/health")
            response.raise_for_status()
            body = response.json()
        except (httpx.HTTPError, ValueError) as e:
            return {"status": "unhealthy", "error": str(e), "timestamp": _now()}

        return {"status": "healthy", "response": body, "timestamp": _now()}

    async def check_database(self) -> dict[str, Any]:
        """List a single post, which fails when the database is unreachable."""
        try:
            response = await self.client.get("/posts", params={"limit": 1})
            response.raise_for_status()
        except httpx.HTTPError as e:
            return {"status": "disconnected", "error": str(e), "timestamp": _now()}

        return {"status": "connected", "timestamp": _now()}

    async def run_full_check(self) -> dict[str, Any]:
        """Run every check and combine them into an overall verdict."""
        health = await self.check_health()
        database = await self.check_database()

        healthy = health["status"] == "healthy" and database["status"] == "connected"
        return {
            "service": SERVICE_NAME,
            "url": str(self.client.base_url).rstrip("/"),
            "checks": {"health": health, "database": database},
            "overall": "healthy" if healthy else "unhealthy",
        }

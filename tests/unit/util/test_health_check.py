"""Unit tests for the external health checker."""

import httpx
import pytest

from blog.util.health_check import HealthChecker


def client_for(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        transport=httpx.MockTransport(handler), base_url="http://api.test"
    )


@pytest.mark.asyncio
async def test_database_failure_makes_the_service_unhealthy():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/health":
            return httpx.Response(200, json={"status": "OK"})
        assert request.url.params["limit"] == "1"
        return httpx.Response(500, json={"detail": "Server error"})

    async with client_for(handler) as client:
        result = await HealthChecker(client).run_full_check()

    assert result["checks"]["health"]["status"] == "healthy"
    assert result["checks"]["database"]["status"] == "disconnected"
    assert "500" in result["checks"]["database"]["error"]
    assert result["overall"] == "unhealthy"


@pytest.mark.asyncio
async def test_unreachable_api_is_unhealthy():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with client_for(handler) as client:
        result = await HealthChecker(client).run_full_check()

    assert result["checks"]["health"]["status"] == "unhealthy"
    assert result["checks"]["health"]["error"] == "connection refused"
    assert result["overall"] == "unhealthy"


@pytest.mark.asyncio
async def test_all_checks_passing_is_healthy():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"status": "OK", "posts": []})

    async with client_for(handler) as client:
        result = await HealthChecker(client).run_full_check()

    assert result["service"] == "Blog API"
    assert result["url"] == "http://api.test"
    assert result["overall"] == "healthy"

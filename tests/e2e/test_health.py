"""End-to-end tests for the health endpoint."""

import pytest

from blog.util.health_check import HealthChecker


@pytest.mark.asyncio
async def test_health_reports_ok(api):
    response = await api.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "OK"
    assert body["uptime"] >= 0
    assert {"timestamp", "environment", "version", "gitSha"} <= body.keys()


@pytest.mark.asyncio
async def test_external_health_check_passes_against_running_app(api):
    result = await HealthChecker(api).run_full_check()

    assert result["overall"] == "healthy"
    assert result["url"] == "http://testserver"
    assert result["checks"]["health"]["response"]["status"] == "OK"
    assert result["checks"]["database"]["status"] == "connected"

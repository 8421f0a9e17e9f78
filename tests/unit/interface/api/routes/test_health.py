"""Unit tests for the health route."""

import pytest

from wire.config import Settings
from wire.interface.api.routes.health import health_check


@pytest.mark.asyncio
async def test_health_reports_environment():
    settings = Settings()

    response = await health_check(settings=settings)

    assert response.status == "healthy"
    assert response.environment == settings.environment
    assert response.git_sha == settings.git_sha

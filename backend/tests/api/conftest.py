"""API test infrastructure: async httpx client with a stubbed irradiance provider."""

from __future__ import annotations

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from solora_api.core.deps import get_irradiance_provider
from solora_api.core.rate_limit import irradiance_limiter


# ---------------------------------------------------------------------------
# Irradiance provider (override in a test class to change behaviour)
# ---------------------------------------------------------------------------

@pytest.fixture
def provider(available_provider):
    return available_provider


# ---------------------------------------------------------------------------
# FastAPI app with overridden dependencies
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture
async def app(provider):
    from solora_api.main import create_app

    application = create_app()
    application.dependency_overrides[get_irradiance_provider] = lambda: provider

    # Reset rate limiter between tests
    irradiance_limiter.reset()

    yield application

    application.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


# ---------------------------------------------------------------------------
# Request helpers
# ---------------------------------------------------------------------------

CAPE_TOWN = {"latitude": -33.9249, "longitude": 18.4241}


@pytest.fixture
def quote_body() -> dict:
    """500 kWh at R2.50 with 550 W panels, located in Cape Town."""
    return {
        "address": "123 Test Street, Cape Town",
        "usage_kwh": 500,
        "tariff": 2.5,
        "panel_watt": 550,
        **CAPE_TOWN,
    }

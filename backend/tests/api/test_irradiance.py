"""Tests for the irradiance lookup and health endpoints."""

from __future__ import annotations

import pytest
from httpx import AsyncClient

from solora_engine.weather.nasa_power import parse_climatology

pytestmark = pytest.mark.asyncio


class TestIrradianceLookup:
    @pytest.fixture
    def provider(self, make_provider, cape_town_payload):
        return make_provider(parse_climatology(cape_town_payload, -33.9249, 18.4241))

    async def test_lookup(self, client: AsyncClient, provider):
        resp = await client.get(
            "/api/v1/irradiance", params={"latitude": -33.9249, "longitude": 18.4241}
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["optimal_month"] == 12
        assert data["average_annual_sun_hours"] == pytest.approx(5.175)
        assert len(data["monthly"]) == 12
        assert data["monthly"][11]["temperature"] == 20.2
        assert provider.calls == [(-33.9249, 18.4241, None)]

    async def test_month_forwarded(self, client: AsyncClient, provider):
        await client.get(
            "/api/v1/irradiance",
            params={"latitude": -33.9249, "longitude": 18.4241, "month": 3},
        )
        assert provider.calls == [(-33.9249, 18.4241, 3)]

    @pytest.mark.parametrize(
        "params",
        [
            {"latitude": 95, "longitude": 18},
            {"latitude": -33, "longitude": 200},
            {"latitude": -33, "longitude": 18, "month": 0},
            {"latitude": -33},
        ],
    )
    async def test_invalid_query(self, client: AsyncClient, provider, params):
        resp = await client.get("/api/v1/irradiance", params=params)
        assert resp.status_code == 422
        assert provider.calls == []


class TestIrradianceUnavailable:
    @pytest.fixture
    def provider(self, unavailable_provider):
        return unavailable_provider

    async def test_service_unavailable(self, client: AsyncClient):
        resp = await client.get(
            "/api/v1/irradiance", params={"latitude": -33.9249, "longitude": 18.4241}
        )
        assert resp.status_code == 503
        assert "stubbed outage" in resp.json()["detail"]


class TestHealth:
    async def test_health(self, client: AsyncClient):
        resp = await client.get("/health")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "ok"
        assert "irradiance" in data["services"]

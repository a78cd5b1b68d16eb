"""Shared test fixtures for Solora engine and API tests."""

from __future__ import annotations

import pytest

from solora_engine.weather.nasa_power import (
    MONTH_KEYS,
    IrradianceResult,
    IrradianceUnavailable,
    parse_climatology,
)

# Cape Town-like monthly GHI (kWh/m²/day), best in December
CAPE_TOWN_GHI = [7.5, 6.8, 5.6, 4.2, 3.1, 2.6, 2.8, 3.6, 4.9, 6.2, 7.2, 7.6]
CAPE_TOWN_T2M = [21.0, 21.3, 20.1, 17.8, 15.4, 13.4, 12.8, 13.2, 14.6, 16.5, 18.6, 20.2]
CAPE_TOWN = (-33.9249, 18.4241)


def make_climatology(
    ghi: list[float],
    temperature: list[float] | None = None,
    wind_speed: list[float] | None = None,
    humidity: list[float] | None = None,
) -> dict:
    """Build a NASA POWER climatology-shaped JSON payload."""

    def _series(values: list[float]) -> dict:
        series = dict(zip(MONTH_KEYS, values))
        series["ANN"] = sum(values) / len(values)
        return series

    parameter: dict = {"ALLSKY_SFC_SW_DWN": _series(ghi)}
    if temperature is not None:
        parameter["T2M"] = _series(temperature)
    if wind_speed is not None:
        parameter["WS10M"] = _series(wind_speed)
    if humidity is not None:
        parameter["RH2M"] = _series(humidity)

    return {
        "type": "Feature",
        "geometry": {"type": "Point", "coordinates": [18.4241, -33.9249, 45.0]},
        "properties": {"parameter": parameter},
        "header": {"title": "NASA/POWER Climatology", "fill_value": -999.0},
        "messages": [],
    }


class StubProvider:
    """Irradiance provider returning a canned result and recording calls."""

    def __init__(self, result: IrradianceResult | None = None):
        self.result = result
        self.calls: list[tuple[float, float, int | None]] = []

    async def fetch(self, latitude, longitude, month=None) -> IrradianceResult:
        self.calls.append((latitude, longitude, month))
        if self.result is None:
            return IrradianceUnavailable(latitude, longitude, "stubbed outage")
        return self.result


# ======================================================================
# Payload fixtures
# ======================================================================

@pytest.fixture
def cape_town_payload() -> dict:
    return make_climatology(
        CAPE_TOWN_GHI,
        temperature=CAPE_TOWN_T2M,
        wind_speed=[5.5] * 12,
        humidity=[70.0] * 12,
    )


@pytest.fixture
def flat_payload() -> dict:
    """Six sun-hours every month."""
    return make_climatology([6.0] * 12)


@pytest.fixture
def flat_summary(flat_payload):
    return parse_climatology(flat_payload, *CAPE_TOWN)


# ======================================================================
# Provider fixtures
# ======================================================================

@pytest.fixture
def available_provider(flat_summary) -> StubProvider:
    return StubProvider(flat_summary)


@pytest.fixture
def unavailable_provider() -> StubProvider:
    return StubProvider(None)


@pytest.fixture
def make_provider():
    """Factory for StubProvider instances."""
    return StubProvider


@pytest.fixture
def climatology():
    """Factory for NASA POWER climatology payloads."""
    return make_climatology

"""NASA POWER irradiance provider.

Fetches long-run monthly climatology (2001-2020 averages) for a point from
the NASA POWER API and normalises it into an :class:`IrradianceSummary`:

- daily global horizontal irradiance per month (kWh/m²/day)
- equivalent peak sun-hours (irradiance / 1 kW/m² at STC)
- annual averages and the month with the best solar resource
- temperature, wind speed and humidity where available

Every failure (network error, HTTP error status, malformed payload, API
error message, missing month) is reported as an
:class:`IrradianceUnavailable` result rather than an exception, so callers
can fall back to a configured sun-hours value.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Protocol

import httpx
import numpy as np

from solora_engine.errors import DataUnavailable

logger = logging.getLogger(__name__)

NASA_POWER_URL = "https://power.larc.nasa.gov/api/temporal/climatology/point"
DEFAULT_TIMEOUT = 30.0

# Peak sun-hours = daily irradiance / STC irradiance (1 kW/m²)
STC_IRRADIANCE_KW_M2 = 1.0

# NASA POWER marks missing values with this sentinel
FILL_VALUE = -999.0

IRRADIANCE_PARAM = "ALLSKY_SFC_SW_DWN"
TEMPERATURE_PARAM = "T2M"
WIND_SPEED_PARAM = "WS10M"
HUMIDITY_PARAM = "RH2M"
PARAMETERS = (IRRADIANCE_PARAM, TEMPERATURE_PARAM, WIND_SPEED_PARAM, HUMIDITY_PARAM)

MONTH_KEYS = ["JAN", "FEB", "MAR", "APR", "MAY", "JUN",
              "JUL", "AUG", "SEP", "OCT", "NOV", "DEC"]


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class MonthlySolarData:
    month: int
    irradiance: float                 # kWh/m²/day
    sun_hours: float                  # h/day
    temperature: float | None = None  # °C
    wind_speed: float | None = None   # m/s
    humidity: float | None = None     # %


@dataclass(frozen=True)
class IrradianceSummary:
    """Normalised irradiance figures for one location."""

    average_annual_irradiance: float
    average_annual_sun_hours: float
    latitude: float
    longitude: float
    optimal_month: int
    temperature: float | None = None
    wind_speed: float | None = None
    humidity: float | None = None
    monthly: tuple[MonthlySolarData, ...] = ()
    month: int | None = None

    @property
    def sun_hours_per_day(self) -> float:
        """Sun-hours for the requested month, else the annual average."""
        if self.month is not None:
            for entry in self.monthly:
                if entry.month == self.month:
                    return entry.sun_hours
        return self.average_annual_sun_hours

    def to_dict(self) -> dict[str, Any]:
        return {
            "average_annual_irradiance": self.average_annual_irradiance,
            "average_annual_sun_hours": self.average_annual_sun_hours,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "optimal_month": self.optimal_month,
            "temperature": self.temperature,
            "wind_speed": self.wind_speed,
            "humidity": self.humidity,
            "month": self.month,
            "sun_hours_per_day": self.sun_hours_per_day,
            "monthly": [
                {
                    "month": m.month,
                    "irradiance": m.irradiance,
                    "sun_hours": m.sun_hours,
                    "temperature": m.temperature,
                    "wind_speed": m.wind_speed,
                    "humidity": m.humidity,
                }
                for m in self.monthly
            ],
        }


@dataclass(frozen=True)
class IrradianceUnavailable:
    """No usable irradiance data for a location."""

    latitude: float
    longitude: float
    reason: str


IrradianceResult = IrradianceSummary | IrradianceUnavailable


class IrradianceProvider(Protocol):
    """Anything that can look up irradiance for a point."""

    async def fetch(
        self, latitude: float, longitude: float, month: int | None = None
    ) -> IrradianceResult: ...


# ---------------------------------------------------------------------------
# Response parsing
# ---------------------------------------------------------------------------

def _check_month(month: int | None) -> None:
    if month is not None and not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")


def _valid_coordinates(latitude: float, longitude: float) -> bool:
    return -90.0 <= latitude <= 90.0 and -180.0 <= longitude <= 180.0


def _monthly_values(
    params: dict, key: str, required: bool
) -> list[float | None]:
    """Extract 12 monthly values for *key*, ``None`` where missing."""
    raw = params.get(key)
    if not isinstance(raw, dict):
        if required:
            raise DataUnavailable(f"No {key} data in response")
        return [None] * 12

    values: list[float | None] = []
    for i, name in enumerate(MONTH_KEYS):
        value = raw.get(name)
        if (
            isinstance(value, (int, float))
            and not isinstance(value, bool)
            and value != FILL_VALUE
            and math.isfinite(value)
        ):
            if required and value < 0:
                raise DataUnavailable(f"Negative {key} value for month {i + 1}: {value}")
            values.append(float(value))
        elif required:
            raise DataUnavailable(f"Missing {key} data for month {i + 1}")
        else:
            values.append(None)
    return values


def parse_climatology(
    payload: Any,
    latitude: float,
    longitude: float,
    month: int | None = None,
) -> IrradianceSummary:
    """Normalise a NASA POWER climatology JSON payload.

    Raises:
        DataUnavailable: if the payload carries an error message or any
            month lacks an irradiance value.
    """
    _check_month(month)

    if not isinstance(payload, dict):
        raise DataUnavailable("Response is not a JSON object")

    for message in payload.get("messages") or []:
        if "error" in str(message).lower():
            raise DataUnavailable(f"NASA POWER error: {message}")

    params = (payload.get("properties") or {}).get("parameter")
    if not isinstance(params, dict):
        raise DataUnavailable("No parameter data in response")

    irradiance = _monthly_values(params, IRRADIANCE_PARAM, required=True)
    temperature = _monthly_values(params, TEMPERATURE_PARAM, required=False)
    wind_speed = _monthly_values(params, WIND_SPEED_PARAM, required=False)
    humidity = _monthly_values(params, HUMIDITY_PARAM, required=False)

    ghi = np.array(irradiance, dtype=np.float64)
    sun_hours = ghi / STC_IRRADIANCE_KW_M2

    monthly = tuple(
        MonthlySolarData(
            month=m + 1,
            irradiance=float(ghi[m]),
            sun_hours=float(sun_hours[m]),
            temperature=temperature[m],
            wind_speed=wind_speed[m],
            humidity=humidity[m],
        )
        for m in range(12)
    )

    # First month wins on ties
    best = int(np.argmax(ghi))

    return IrradianceSummary(
        average_annual_irradiance=float(np.mean(ghi)),
        average_annual_sun_hours=float(np.mean(sun_hours)),
        latitude=latitude,
        longitude=longitude,
        optimal_month=best + 1,
        temperature=monthly[best].temperature,
        wind_speed=monthly[best].wind_speed,
        humidity=monthly[best].humidity,
        monthly=monthly,
        month=month,
    )


# ---------------------------------------------------------------------------
# Provider
# ---------------------------------------------------------------------------

class NasaPowerProvider:
    """Irradiance provider backed by the NASA POWER climatology API.

    Holds no per-request state; one HTTP request per :meth:`fetch`.  The
    *transport* argument lets tests substitute ``httpx.MockTransport``.
    """

    def __init__(
        self,
        base_url: str = NASA_POWER_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self.transport = transport

    def _params(self, latitude: float, longitude: float) -> dict:
        # Climatology endpoint does not accept start/end params
        return {
            "latitude": latitude,
            "longitude": longitude,
            "community": "RE",
            "parameters": ",".join(PARAMETERS),
            "format": "JSON",
        }

    async def fetch(
        self, latitude: float, longitude: float, month: int | None = None
    ) -> IrradianceResult:
        """Look up irradiance for a point, optionally for a single month."""
        _check_month(month)

        if not _valid_coordinates(latitude, longitude):
            reason = f"Invalid coordinates: lat={latitude}, lon={longitude}"
            logger.warning("NASA POWER lookup skipped: %s", reason)
            return IrradianceUnavailable(latitude, longitude, reason)

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.get(
                    self.base_url, params=self._params(latitude, longitude)
                )
                response.raise_for_status()
            payload = response.json()
            summary = parse_climatology(payload, latitude, longitude, month)
        except (httpx.HTTPError, ValueError, DataUnavailable) as exc:
            logger.warning(
                "NASA POWER data unavailable for (%.4f, %.4f): %s",
                latitude, longitude, exc,
            )
            return IrradianceUnavailable(latitude, longitude, str(exc) or type(exc).__name__)

        logger.info(
            "NASA POWER data for (%.4f, %.4f): irradiance=%.2f kWh/m2/day, optimal month=%d",
            latitude, longitude, summary.average_annual_irradiance, summary.optimal_month,
        )
        return summary

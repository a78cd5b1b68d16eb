"""
Fallbacks used when a location has no irradiance data.

Provides the sun-hours policy applied after an irradiance lookup, regional
sun-hour estimates for South Africa, and approximate coordinates for the
main South African metros so that quotes captured with only a street
address can still be sized against real irradiance data.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from solora_engine.quote.models import DEFAULT_SUN_HOURS

from .nasa_power import IrradianceResult, IrradianceSummary

SOURCE_NASA_POWER = "nasa_power"
SOURCE_REGIONAL = "regional_estimate"
SOURCE_DEFAULT = "default"

# Conservative national figure when no region matches
SOUTH_AFRICA_SUN_HOURS = 6.5


@dataclass(frozen=True)
class SunHoursPolicy:
    """How to pick sun-hours when the irradiance lookup is unavailable."""

    default_sun_hours: float = DEFAULT_SUN_HOURS
    use_regional_estimates: bool = False


@dataclass(frozen=True)
class ResolvedSunHours:
    sun_hours: float
    source: str

    @property
    def used_default(self) -> bool:
        return self.source != SOURCE_NASA_POWER


def regional_sun_hours(latitude: float, longitude: float) -> float:
    """Typical peak sun-hours for a South African location."""
    # Northern Cape
    if latitude > -31.0 and 18.0 < longitude < 25.0:
        return 7.5
    # Western Cape coast
    if latitude < -33.0 and longitude < 19.0:
        return 6.8
    # Gauteng highveld
    if -27.0 < latitude < -25.0 and 27.0 < longitude < 29.0:
        return 7.2
    # KwaZulu-Natal coast
    if longitude > 29.0:
        return 6.5
    # Free State, North West
    if -30.0 < latitude < -26.0:
        return 7.0
    return SOUTH_AFRICA_SUN_HOURS


def _usable(sun_hours: float) -> bool:
    return math.isfinite(sun_hours) and sun_hours >= 0


def resolve_sun_hours(
    lookup: IrradianceResult | None,
    policy: SunHoursPolicy = SunHoursPolicy(),
    latitude: float | None = None,
    longitude: float | None = None,
) -> ResolvedSunHours:
    """Pick the sun-hours a quote is sized with.

    Uses the lookup when it succeeded with finite, non-negative sun-hours,
    otherwise a regional estimate (if the policy allows it and coordinates
    are known), otherwise the policy's default.
    """
    if isinstance(lookup, IrradianceSummary) and _usable(lookup.sun_hours_per_day):
        return ResolvedSunHours(lookup.sun_hours_per_day, SOURCE_NASA_POWER)

    if policy.use_regional_estimates and latitude is not None and longitude is not None:
        return ResolvedSunHours(regional_sun_hours(latitude, longitude), SOURCE_REGIONAL)

    return ResolvedSunHours(policy.default_sun_hours, SOURCE_DEFAULT)


# ---------------------------------------------------------------------------
# Approximate coordinates
# ---------------------------------------------------------------------------

# (keywords, (lat, lon) of the city centre)
_CITY_COORDINATES: list[tuple[tuple[str, ...], tuple[float, float]]] = [
    (("cape town", "durbanville", "bellville", "stellenbosch", "paarl"), (-33.9249, 18.4241)),
    (("johannesburg", "joburg", "sandton", "randburg"), (-26.2041, 28.0473)),
    (("pretoria", "centurion"), (-25.7479, 28.2293)),
    (("durban", "pinetown", "umhlanga"), (-29.8587, 31.0218)),
    (("port elizabeth", "gqeberha"), (-33.9608, 25.6022)),
    (("bloemfontein",), (-29.1217, 26.2148)),
    (("east london",), (-33.0153, 27.9116)),
    (("kimberley",), (-28.7282, 24.7499)),
]


def approximate_coordinates(address: str) -> tuple[float, float] | None:
    """City-centre coordinates for an address, or ``None`` if unknown.

    Matching is a case-insensitive keyword search in table order, so
    "Durbanville" resolves to Cape Town before "Durban" is tried.
    """
    text = address.lower()
    for keywords, coords in _CITY_COORDINATES:
        if any(k in text for k in keywords):
            return coords
    return None

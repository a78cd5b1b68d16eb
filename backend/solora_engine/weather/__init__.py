"""Irradiance data module (NASA POWER provider, sun-hours fallbacks)."""

from .nasa_power import (
    IrradianceProvider,
    IrradianceResult,
    IrradianceSummary,
    IrradianceUnavailable,
    MonthlySolarData,
    NasaPowerProvider,
    parse_climatology,
)
from .fallback import (
    SOURCE_DEFAULT,
    SOURCE_NASA_POWER,
    SOURCE_REGIONAL,
    ResolvedSunHours,
    SunHoursPolicy,
    approximate_coordinates,
    regional_sun_hours,
    resolve_sun_hours,
)

__all__ = [
    "IrradianceProvider",
    "IrradianceResult",
    "IrradianceSummary",
    "IrradianceUnavailable",
    "MonthlySolarData",
    "NasaPowerProvider",
    "parse_climatology",
    "SOURCE_DEFAULT",
    "SOURCE_NASA_POWER",
    "SOURCE_REGIONAL",
    "ResolvedSunHours",
    "SunHoursPolicy",
    "approximate_coordinates",
    "regional_sun_hours",
    "resolve_sun_hours",
]

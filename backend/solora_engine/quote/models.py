"""
Data model for solar quote calculations.

``QuoteInputs`` is validated at construction so that malformed requests
fail before any irradiance lookup.  ``QuoteOutputs`` is the immutable
result handed to persistence and document-generation collaborators.
``CalculationSettings`` carries every tunable assumption of the sizing
heuristics as a plain parameter object; the engine never reads settings
from storage itself.

Monetary values are in the tariff currency (ZAR by default).  Energy is
in kWh, power in kW unless noted.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, replace
from typing import Any

from solora_engine.errors import QuoteValidationError


# ---------------------------------------------------------------------------
# Sizing assumptions
# ---------------------------------------------------------------------------
DAYS_PER_MONTH = 30.0             # fixed billing month, not calendar-accurate
SELF_CONSUMPTION_RATIO = 0.8      # share of consumption offset by generation
INVERTER_SIZING_RATIO = 0.8       # inverter kW per kWp of array
MIN_INVERTER_KW = 1.0             # smallest inverter quoted

# ---------------------------------------------------------------------------
# Cost and impact defaults
# ---------------------------------------------------------------------------
PANEL_COST_PER_WATT = 15.0        # R/W
INVERTER_COST_PER_WATT = 12.0     # R/W
INSTALLATION_COST_PER_KW = 15_000.0  # R/kW
DEFAULT_SUN_HOURS = 5.0           # h/day when no irradiance data is available
CO2_KG_PER_KWH = 0.5              # grid emission factor
VAT_RATE = 0.15


@dataclass(frozen=True)
class CalculationSettings:
    """Tunable assumptions used by :func:`calculate`."""

    days_per_month: float = DAYS_PER_MONTH
    self_consumption_ratio: float = SELF_CONSUMPTION_RATIO
    inverter_sizing_ratio: float = INVERTER_SIZING_RATIO
    min_inverter_kw: float = MIN_INVERTER_KW

    panel_cost_per_watt: float = PANEL_COST_PER_WATT
    inverter_cost_per_watt: float = INVERTER_COST_PER_WATT
    installation_cost_per_kw: float = INSTALLATION_COST_PER_KW

    default_sun_hours: float = DEFAULT_SUN_HOURS
    co2_kg_per_kwh: float = CO2_KG_PER_KWH
    vat_rate: float = VAT_RATE


# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------

def _require_finite(field: str, value: float) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise QuoteValidationError(field, f"must be a number, got {value!r}")
    if not math.isfinite(value):
        raise QuoteValidationError(field, f"must be finite, got {value!r}")
    return float(value)


def _optional_non_negative(field: str, value: float | None) -> float | None:
    if value is None:
        return None
    value = _require_finite(field, value)
    if value < 0:
        raise QuoteValidationError(field, f"must not be negative, got {value}")
    return value


@dataclass(frozen=True)
class QuoteInputs:
    """Validated inputs for a single quote calculation.

    Exactly the figures a consultant captures on site: either the monthly
    consumption or the monthly bill, the tariff, the chosen panel and the
    sun-hours already resolved for the location.
    """

    address: str
    usage_kwh: float | None
    bill_rands: float | None
    tariff_per_kwh: float
    panel_wattage: int
    sun_hours_per_day: float = DEFAULT_SUN_HOURS
    latitude: float | None = None
    longitude: float | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.address, str):
            raise QuoteValidationError("address", "must be a string")

        tariff = _require_finite("tariff_per_kwh", self.tariff_per_kwh)
        if tariff <= 0:
            raise QuoteValidationError("tariff_per_kwh", f"must be positive, got {tariff}")

        if isinstance(self.panel_wattage, bool) or not isinstance(self.panel_wattage, int):
            raise QuoteValidationError(
                "panel_wattage", f"must be an integer, got {self.panel_wattage!r}"
            )
        if self.panel_wattage <= 0:
            raise QuoteValidationError(
                "panel_wattage", f"must be positive, got {self.panel_wattage}"
            )

        usage = _optional_non_negative("usage_kwh", self.usage_kwh)
        bill = _optional_non_negative("bill_rands", self.bill_rands)
        if not ((usage is not None and usage > 0) or (bill is not None and bill > 0)):
            raise QuoteValidationError(
                "usage_kwh", "either monthly usage or monthly bill must be positive"
            )

        sun_hours = _require_finite("sun_hours_per_day", self.sun_hours_per_day)
        if sun_hours < 0:
            raise QuoteValidationError(
                "sun_hours_per_day", f"must not be negative, got {sun_hours}"
            )

        if (self.latitude is None) != (self.longitude is None):
            raise QuoteValidationError(
                "latitude", "latitude and longitude must be given together"
            )
        if self.latitude is not None and self.longitude is not None:
            lat = _require_finite("latitude", self.latitude)
            lon = _require_finite("longitude", self.longitude)
            if not -90.0 <= lat <= 90.0:
                raise QuoteValidationError("latitude", f"out of range: {lat}")
            if not -180.0 <= lon <= 180.0:
                raise QuoteValidationError("longitude", f"out of range: {lon}")

    @property
    def has_location(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    def with_sun_hours(self, sun_hours_per_day: float) -> QuoteInputs:
        """Return a re-validated copy carrying the resolved sun-hours."""
        return replace(self, sun_hours_per_day=sun_hours_per_day)

    def with_location(self, latitude: float, longitude: float) -> QuoteInputs:
        return replace(self, latitude=latitude, longitude=longitude)


@dataclass(frozen=True)
class QuoteOutputs:
    """Sizing and savings figures for one quote."""

    panel_count: int
    system_size_kw: float
    inverter_size_kw: float
    monthly_savings: float
    estimated_monthly_generation_kwh: float
    payback_months: int

    # Echoes for downstream persistence
    usage_kwh: float
    tariff_per_kwh: float
    panel_wattage: int
    sun_hours_per_day: float
    used_default_irradiance: bool = True

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

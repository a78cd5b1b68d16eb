"""
Solar system sizing calculator.

Turns validated :class:`QuoteInputs` into a recommended PV array size,
panel and inverter counts, expected generation, monthly savings and a
simple payback period.  Pure arithmetic: no I/O, no shared state, safe to
call from any number of threads.

Sizing chain::

    monthly usage -> daily demand (30-day month) -> kWp = daily kWh / sun-hours
                  -> panels = ceil(kWp / panel kW)
                  -> inverter = max(kWp * 0.8, 1 kW)

Rounding uses Python's ``round`` (half-to-even) on ``value * 100`` and is
applied only to reported figures; intermediate values stay unrounded.
"""

from __future__ import annotations

import math

from solora_engine.weather.nasa_power import IrradianceSummary

from .models import CalculationSettings, QuoteInputs, QuoteOutputs

DEFAULT_SETTINGS = CalculationSettings()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def round2(value: float) -> float:
    """Round to two decimals, ties to even."""
    return round(value * 100.0) / 100.0


def resolve_monthly_usage(inputs: QuoteInputs) -> float:
    """Monthly kWh: explicit usage first, else bill / tariff, else 0."""
    if inputs.usage_kwh is not None:
        return float(inputs.usage_kwh)
    bill = inputs.bill_rands or 0.0
    if bill <= 0:
        return 0.0
    return bill / inputs.tariff_per_kwh


def system_size_kw(daily_kwh: float, sun_hours_per_day: float) -> float:
    """Array size (kWp) needed to cover *daily_kwh*; 0 without sun."""
    if sun_hours_per_day <= 0:
        return 0.0
    return daily_kwh / sun_hours_per_day


def panel_count(system_kw: float, panel_wattage: float) -> int:
    """Number of panels of *panel_wattage* W needed for *system_kw*."""
    panel_kw = panel_wattage / 1000.0
    if panel_kw <= 0:
        return 0
    return int(math.ceil(system_kw / panel_kw))


def inverter_size_kw(system_kw: float, settings: CalculationSettings = DEFAULT_SETTINGS) -> float:
    return max(system_kw * settings.inverter_sizing_ratio, settings.min_inverter_kw)


def installed_cost(
    panels: int,
    panel_wattage: float,
    inverter_kw: float,
    system_kw: float,
    settings: CalculationSettings = DEFAULT_SETTINGS,
) -> float:
    """Hardware plus installation cost of the quoted system."""
    panel_cost = panels * panel_wattage * settings.panel_cost_per_watt
    inverter_cost = inverter_kw * 1000.0 * settings.inverter_cost_per_watt
    install_cost = system_kw * settings.installation_cost_per_kw
    return panel_cost + inverter_cost + install_cost


def payback_months(total_cost: float, monthly_savings: float) -> int:
    """Months until savings repay *total_cost*; 0 when not computable."""
    if monthly_savings <= 0:
        return 0
    return int(round(total_cost / monthly_savings))


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def calculate(
    inputs: QuoteInputs,
    irradiance: IrradianceSummary | None = None,
    settings: CalculationSettings = DEFAULT_SETTINGS,
) -> QuoteOutputs:
    """Size a grid-tied PV system and estimate its savings.

    Args:
        inputs: Validated quote inputs.  ``sun_hours_per_day`` must already
            be resolved (from *irradiance* or the caller's fallback policy).
        irradiance: Summary the sun-hours were taken from, if any.  Only
            used to flag whether the quote relied on fallback sun-hours.
        settings: Sizing ratios and cost assumptions.

    Returns:
        QuoteOutputs with 2-decimal sizing and savings figures.
    """
    usage_kwh = resolve_monthly_usage(inputs)
    sun_hours = float(inputs.sun_hours_per_day)

    daily_kwh = usage_kwh / settings.days_per_month
    system_kw = system_size_kw(daily_kwh, sun_hours)
    panels = panel_count(system_kw, inputs.panel_wattage)
    inverter_kw = inverter_size_kw(system_kw, settings)

    # No array means nothing is offset
    if system_kw > 0:
        savings = usage_kwh * inputs.tariff_per_kwh * settings.self_consumption_ratio
    else:
        savings = 0.0

    generation_kwh = system_kw * sun_hours * settings.days_per_month

    cost = installed_cost(panels, inputs.panel_wattage, inverter_kw, system_kw, settings)
    payback = payback_months(cost, savings)

    return QuoteOutputs(
        panel_count=panels,
        system_size_kw=round2(system_kw),
        inverter_size_kw=round2(inverter_kw),
        monthly_savings=round2(savings),
        estimated_monthly_generation_kwh=round2(generation_kwh),
        payback_months=payback,
        usage_kwh=usage_kwh,
        tariff_per_kwh=float(inputs.tariff_per_kwh),
        panel_wattage=inputs.panel_wattage,
        sun_hours_per_day=sun_hours,
        used_default_irradiance=irradiance is None,
    )

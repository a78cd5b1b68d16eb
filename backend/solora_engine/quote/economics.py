"""Financial summary for a calculated quote.

Extends the monthly figures of :class:`QuoteOutputs` with the totals a
proposal document shows: system cost, VAT-inclusive price, annual
savings, payback in years and the yearly CO2 offset.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from .calculator import DEFAULT_SETTINGS, installed_cost, round2
from .models import CalculationSettings, QuoteOutputs

MONTHS_PER_YEAR = 12


@dataclass(frozen=True)
class FinancialSummary:
    system_cost: float
    vat: float
    total_cost: float
    annual_savings: float
    payback_years: float | None
    annual_generation_kwh: float
    co2_savings_kg_per_year: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def financial_summary(
    outputs: QuoteOutputs,
    settings: CalculationSettings = DEFAULT_SETTINGS,
) -> FinancialSummary:
    """Derive yearly financial figures from a quote.

    Works from the reported (rounded) quote so the numbers agree with
    what the customer sees.  ``payback_years`` is ``None`` when the quote
    has no savings.
    """
    cost = installed_cost(
        outputs.panel_count,
        outputs.panel_wattage,
        outputs.inverter_size_kw,
        outputs.system_size_kw,
        settings,
    )
    vat = cost * settings.vat_rate

    annual_savings = outputs.monthly_savings * MONTHS_PER_YEAR
    payback_years = cost / annual_savings if annual_savings > 0 else None

    annual_generation = outputs.estimated_monthly_generation_kwh * MONTHS_PER_YEAR
    co2 = annual_generation * settings.co2_kg_per_kwh

    return FinancialSummary(
        system_cost=round2(cost),
        vat=round2(vat),
        total_cost=round2(cost + vat),
        annual_savings=round2(annual_savings),
        payback_years=round2(payback_years) if payback_years is not None else None,
        annual_generation_kwh=round2(annual_generation),
        co2_savings_kg_per_year=round2(co2),
    )

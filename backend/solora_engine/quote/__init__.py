"""
Quote engine module.

Validated quote inputs, the pure sizing/savings calculator and the
derived financial summary.
"""

from .models import CalculationSettings, QuoteInputs, QuoteOutputs
from .calculator import (
    calculate,
    installed_cost,
    inverter_size_kw,
    panel_count,
    payback_months,
    resolve_monthly_usage,
    round2,
    system_size_kw,
)
from .economics import FinancialSummary, financial_summary

__all__ = [
    # models
    "CalculationSettings",
    "QuoteInputs",
    "QuoteOutputs",
    # calculator
    "calculate",
    "installed_cost",
    "inverter_size_kw",
    "panel_count",
    "payback_months",
    "resolve_monthly_usage",
    "round2",
    "system_size_kw",
    # economics
    "FinancialSummary",
    "financial_summary",
]

"""Pydantic schemas for quote calculation and irradiance lookup."""
from pydantic import BaseModel, Field


class QuoteRequest(BaseModel):
    address: str = Field(default="", max_length=500)
    usage_kwh: float | None = Field(default=None, description="Monthly consumption in kWh")
    bill_rands: float | None = Field(default=None, description="Monthly electricity bill")
    tariff: float | None = Field(default=None, description="R/kWh; configured default if omitted")
    panel_watt: int | None = Field(default=None, description="Panel rating in W; configured default if omitted")
    latitude: float | None = None
    longitude: float | None = None
    month: int | None = Field(
        default=None, ge=1, le=12, description="Size against this month's sun-hours instead of the annual average"
    )


class CalculationResponse(BaseModel):
    panel_count: int
    system_size_kw: float
    inverter_size_kw: float
    monthly_savings: float
    estimated_monthly_generation_kwh: float
    payback_months: int
    usage_kwh: float
    tariff_per_kwh: float
    panel_wattage: int
    sun_hours_per_day: float
    used_default_irradiance: bool


class FinancialsResponse(BaseModel):
    system_cost: float
    vat: float
    total_cost: float
    annual_savings: float
    payback_years: float | None
    annual_generation_kwh: float
    co2_savings_kg_per_year: float


class MonthlySolarResponse(BaseModel):
    month: int
    irradiance: float
    sun_hours: float
    temperature: float | None = None
    wind_speed: float | None = None
    humidity: float | None = None


class IrradianceResponse(BaseModel):
    average_annual_irradiance: float
    average_annual_sun_hours: float
    latitude: float
    longitude: float
    optimal_month: int
    temperature: float | None = None
    wind_speed: float | None = None
    humidity: float | None = None
    month: int | None = None
    sun_hours_per_day: float
    monthly: list[MonthlySolarResponse] = []


class QuoteResponse(BaseModel):
    address: str
    latitude: float | None
    longitude: float | None
    location_source: str
    sun_hours_source: str
    calculation: CalculationResponse
    financials: FinancialsResponse
    irradiance: IrradianceResponse | None = None
    warnings: list[str] = []

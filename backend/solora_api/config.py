from pydantic_settings import BaseSettings

from solora_engine.quote.models import CalculationSettings
from solora_engine.weather.fallback import SunHoursPolicy
from solora_engine.weather.nasa_power import NASA_POWER_URL


class Settings(BaseSettings):
    model_config = {"env_prefix": "SOLORA_", "case_sensitive": False}

    # App
    environment: str = "development"
    app_name: str = "Solora Quote"
    log_json: bool = False
    cors_origins: str = "*"

    # NASA POWER
    nasa_power_url: str = NASA_POWER_URL
    nasa_power_timeout: float = 30.0
    irradiance_rate_limit: int = 30  # requests per minute per client

    # Quote defaults
    default_tariff: float = 2.50         # R/kWh
    default_panel_watt: int = 420        # W
    default_sun_hours: float = 5.0       # h/day
    use_regional_sun_hours: bool = True
    approximate_location_from_address: bool = True

    # Costs and impact
    panel_cost_per_watt: float = 15.0        # R/W
    inverter_cost_per_watt: float = 12.0     # R/W
    installation_cost_per_kw: float = 15000.0  # R/kW
    co2_kg_per_kwh: float = 0.5
    vat_rate: float = 0.15

    def calculation_settings(self) -> CalculationSettings:
        return CalculationSettings(
            panel_cost_per_watt=self.panel_cost_per_watt,
            inverter_cost_per_watt=self.inverter_cost_per_watt,
            installation_cost_per_kw=self.installation_cost_per_kw,
            default_sun_hours=self.default_sun_hours,
            co2_kg_per_kwh=self.co2_kg_per_kwh,
            vat_rate=self.vat_rate,
        )

    def sun_hours_policy(self) -> SunHoursPolicy:
        return SunHoursPolicy(
            default_sun_hours=self.default_sun_hours,
            use_regional_estimates=self.use_regional_sun_hours,
        )


settings = Settings()

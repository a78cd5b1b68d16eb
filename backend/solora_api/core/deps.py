from solora_api.config import settings
from solora_engine.weather.nasa_power import IrradianceProvider, NasaPowerProvider


def get_irradiance_provider() -> IrradianceProvider:
    return NasaPowerProvider(
        base_url=settings.nasa_power_url,
        timeout=settings.nasa_power_timeout,
    )

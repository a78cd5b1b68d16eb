import logging
from dataclasses import dataclass, field

from solora_api.config import Settings, settings as app_settings
from solora_engine.quote import (
    FinancialSummary,
    QuoteInputs,
    QuoteOutputs,
    calculate,
    financial_summary,
)
from solora_engine.weather import (
    IrradianceProvider,
    IrradianceSummary,
    approximate_coordinates,
    resolve_sun_hours,
)
from solora_engine.weather.fallback import SOURCE_DEFAULT, SOURCE_NASA_POWER, SOURCE_REGIONAL

logger = logging.getLogger(__name__)

LOCATION_REQUEST = "request"
LOCATION_ADDRESS_LOOKUP = "address_lookup"
LOCATION_NONE = "none"


@dataclass
class QuoteResult:
    inputs: QuoteInputs
    outputs: QuoteOutputs
    financials: FinancialSummary
    irradiance: IrradianceSummary | None
    sun_hours_source: str
    location_source: str
    warnings: list[str] = field(default_factory=list)


async def calculate_quote(
    provider: IrradianceProvider,
    *,
    address: str = "",
    usage_kwh: float | None = None,
    bill_rands: float | None = None,
    tariff: float | None = None,
    panel_watt: int | None = None,
    latitude: float | None = None,
    longitude: float | None = None,
    month: int | None = None,
    config: Settings = app_settings,
) -> QuoteResult:
    """Validate inputs, resolve sun-hours for the site and size the system.

    Raises QuoteValidationError before any irradiance lookup when the
    inputs are malformed.  An unavailable lookup falls back to the
    configured sun-hours policy.
    """
    inputs = QuoteInputs(
        address=address,
        usage_kwh=usage_kwh,
        bill_rands=bill_rands,
        tariff_per_kwh=tariff if tariff is not None else config.default_tariff,
        panel_wattage=panel_watt if panel_watt is not None else config.default_panel_watt,
        sun_hours_per_day=config.default_sun_hours,
        latitude=latitude,
        longitude=longitude,
    )

    warnings: list[str] = []

    # Step 1: location
    location_source = LOCATION_NONE
    if inputs.has_location:
        location_source = LOCATION_REQUEST
    elif config.approximate_location_from_address and address:
        coords = approximate_coordinates(address)
        if coords is not None:
            inputs = inputs.with_location(*coords)
            location_source = LOCATION_ADDRESS_LOOKUP
            warnings.append("Using approximate location")
            logger.info("Approximate coordinates for %r: %s", address, coords)

    # Step 2: irradiance, at most one lookup
    lookup = None
    if inputs.has_location:
        lookup = await provider.fetch(inputs.latitude, inputs.longitude, month)

    resolved = resolve_sun_hours(
        lookup, config.sun_hours_policy(), inputs.latitude, inputs.longitude
    )
    if resolved.source == SOURCE_REGIONAL:
        warnings.append("Using regional solar estimates")
    elif resolved.source == SOURCE_DEFAULT:
        warnings.append("Using default sun-hours")

    inputs = inputs.with_sun_hours(resolved.sun_hours)
    summary = lookup if resolved.source == SOURCE_NASA_POWER else None

    # Step 3: sizing and financials
    calc_settings = config.calculation_settings()
    outputs = calculate(inputs, summary, calc_settings)
    financials = financial_summary(outputs, calc_settings)

    logger.info(
        "Quote calculated: %.2f kW, %d panels, R%.2f/month savings",
        outputs.system_size_kw,
        outputs.panel_count,
        outputs.monthly_savings,
        extra={
            "latitude": inputs.latitude,
            "longitude": inputs.longitude,
            "sun_hours_source": resolved.source,
        },
    )

    return QuoteResult(
        inputs=inputs,
        outputs=outputs,
        financials=financials,
        irradiance=summary,
        sun_hours_source=resolved.source,
        location_source=location_source,
        warnings=warnings,
    )

"""Quote calculation endpoint."""
from fastapi import APIRouter, Depends, HTTPException, Request

from solora_api.core.deps import get_irradiance_provider
from solora_api.core.rate_limit import irradiance_limiter
from solora_api.schemas.quote import QuoteRequest, QuoteResponse
from solora_api.services.quote_service import calculate_quote

from solora_engine.errors import QuoteValidationError
from solora_engine.weather import IrradianceProvider

router = APIRouter()


@router.post(
    "/calculate",
    response_model=QuoteResponse,
    summary="Calculate a solar quote",
    description="Size a PV system from monthly usage or bill, using NASA POWER sun-hours for the site when available.",
)
async def calculate(
    body: QuoteRequest,
    request: Request,
    provider: IrradianceProvider = Depends(get_irradiance_provider),
):
    irradiance_limiter.check(request)

    try:
        result = await calculate_quote(
            provider,
            address=body.address,
            usage_kwh=body.usage_kwh,
            bill_rands=body.bill_rands,
            tariff=body.tariff,
            panel_watt=body.panel_watt,
            latitude=body.latitude,
            longitude=body.longitude,
            month=body.month,
        )
    except QuoteValidationError as exc:
        raise HTTPException(
            status_code=422,
            detail={"field": exc.field, "message": exc.message},
        )

    return {
        "address": result.inputs.address,
        "latitude": result.inputs.latitude,
        "longitude": result.inputs.longitude,
        "location_source": result.location_source,
        "sun_hours_source": result.sun_hours_source,
        "calculation": result.outputs.to_dict(),
        "financials": result.financials.to_dict(),
        "irradiance": result.irradiance.to_dict() if result.irradiance else None,
        "warnings": result.warnings,
    }

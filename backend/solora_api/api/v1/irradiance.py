from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from solora_api.core.deps import get_irradiance_provider
from solora_api.core.rate_limit import irradiance_limiter
from solora_api.schemas.quote import IrradianceResponse

from solora_engine.weather import IrradianceProvider, IrradianceUnavailable

router = APIRouter()


@router.get(
    "/irradiance",
    response_model=IrradianceResponse,
    summary="Look up solar irradiance",
    description="Return NASA POWER monthly climatology, sun-hours and the best solar month for a point.",
)
async def get_irradiance(
    request: Request,
    latitude: float = Query(ge=-90, le=90),
    longitude: float = Query(ge=-180, le=180),
    month: int | None = Query(default=None, ge=1, le=12),
    provider: IrradianceProvider = Depends(get_irradiance_provider),
):
    irradiance_limiter.check(request)

    result = await provider.fetch(latitude, longitude, month)
    if isinstance(result, IrradianceUnavailable):
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Irradiance data unavailable: {result.reason}",
        )
    return result.to_dict()

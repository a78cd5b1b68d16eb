from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from solora_api.config import settings
from solora_api.api.v1 import irradiance, quotes
from solora_api.core.logging import RequestLoggingMiddleware, setup_logging


def create_app() -> FastAPI:
    setup_logging(json_format=settings.log_json)

    application = FastAPI(
        title=settings.app_name,
        version="0.1.0",
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.cors_origins.split(",") if o.strip()],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.add_middleware(RequestLoggingMiddleware)

    application.include_router(quotes.router, prefix="/api/v1/quotes", tags=["quotes"])
    application.include_router(irradiance.router, prefix="/api/v1", tags=["irradiance"])

    @application.get("/health")
    async def health_check() -> dict:
        return {
            "status": "ok",
            "environment": settings.environment,
            "services": {"irradiance": settings.nasa_power_url},
        }

    return application


app = create_app()

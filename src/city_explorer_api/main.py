"""FastAPI application factory.

Creates the FastAPI app with lifespan management, exception handlers,
and OpenAPI metadata.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger

from city_explorer_api import __version__
from city_explorer_api.core.config import Settings, get_settings
from city_explorer_api.core.database import dispose_engine, init_engine
from city_explorer_api.core.logging import setup_logging
from city_explorer_api.lib.cache import build_policies
from city_explorer_api.lib.geocoder import get_configured_geocoder
from city_explorer_api.schemas.common import HealthResponse


def warn_unconfigured_providers(settings: Settings) -> list[str]:
    """Log each gateway that lacks an API key and return their names.

    Startup still succeeds; requests that need such a gateway fail with 502.
    """
    missing = []
    geocoder = get_configured_geocoder(settings)
    if not geocoder.is_configured:
        missing.append(geocoder.provider_name)
        logger.warning(f"Geocoder {geocoder.provider_name} has no API key; /location lookups will fail")
    for kind, policy in build_policies(settings).items():
        if not policy.provider.is_configured:
            missing.append(policy.provider.provider_name)
            logger.warning(f"Provider {policy.provider.provider_name} has no API key; {kind} lookups will fail")
    return missing


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application lifecycle: init engine on startup, dispose on shutdown."""
    settings = get_settings()
    setup_logging(settings.log_level, log_dir=settings.log_dir, json_logs=settings.log_json)
    init_engine(settings.database_url, echo=False, schema=settings.database_schema)
    warn_unconfigured_providers(settings)
    logger.info(f"City Explorer API {__version__} started ({settings.environment})")

    yield

    await dispose_engine()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    settings = get_settings()

    app = FastAPI(
        title="City Explorer API",
        description="Weather, events, movies, and local reviews for any searched place",
        version=__version__,
        lifespan=lifespan,
    )

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={"detail": str(exc)},
        )

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health() -> HealthResponse:
        return HealthResponse()

    from city_explorer_api.api.router import create_router, setup_middleware

    setup_middleware(app, settings)
    app.include_router(create_router(settings))

    return app

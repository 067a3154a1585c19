"""Root API router with /api/v1 prefix and middleware registration."""

from fastapi import APIRouter, FastAPI

from city_explorer_api.api.middleware import SecurityHeadersMiddleware, setup_cors
from city_explorer_api.core.config import Settings


def create_router(settings: Settings) -> APIRouter:
    """Create the root API router with all sub-routers included.

    Args:
        settings: Application settings.

    Returns:
        Configured API router.
    """
    from city_explorer_api.api.v1.location import location_router
    from city_explorer_api.api.v1.resources import resources_router

    root_router = APIRouter(prefix=settings.api_v1_prefix)
    root_router.include_router(location_router)
    root_router.include_router(resources_router)

    return root_router


def setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Register all middleware on the FastAPI app.

    Args:
        app: The FastAPI application.
        settings: Application settings.
    """
    setup_cors(app, settings)
    app.add_middleware(SecurityHeadersMiddleware)

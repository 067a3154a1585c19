"""Location endpoint: resolves free-text search to a canonical location."""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from city_explorer_api.core.config import Settings, get_settings
from city_explorer_api.core.dependencies import get_async_session
from city_explorer_api.lib.cache import GatewayError, NotFoundError, StoreError
from city_explorer_api.schemas.common import ERROR_RESPONSES
from city_explorer_api.schemas.location import LocationResponse
from city_explorer_api.services.explorer_service import resolve_location

location_router = APIRouter(tags=["location"])


@location_router.get(
    "/location",
    response_model=LocationResponse,
    responses=ERROR_RESPONSES,
)
async def get_location(
    data: str = Query(  # noqa: B008
        ...,
        min_length=1,
        max_length=500,
        description="Free-text place to search for (1-500 characters)",
    ),
    session: AsyncSession = Depends(get_async_session),  # noqa: B008
    settings: Settings = Depends(get_settings),  # noqa: B008
) -> LocationResponse:
    """Resolve a search query to a location, geocoding it the first time it is seen."""
    query = data.strip()
    if not query:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Search query must not be empty or whitespace-only.",
        )

    try:
        return await resolve_location(session, settings, query)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except GatewayError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Geocoding provider is temporarily unavailable. Please retry later.",
        ) from e
    except StoreError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Location store is temporarily unavailable.",
        ) from e

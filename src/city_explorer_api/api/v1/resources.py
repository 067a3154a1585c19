"""Resource endpoints: weather, events, movies, and reviews for a resolved location."""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from city_explorer_api.core.config import Settings, get_settings
from city_explorer_api.core.dependencies import get_async_session
from city_explorer_api.lib.cache import GatewayError, NotFoundError, ResourceKind, StoreError
from city_explorer_api.schemas.common import ERROR_RESPONSES
from city_explorer_api.schemas.resources import EventResponse, MovieResponse, ReviewResponse, WeatherResponse
from city_explorer_api.services.explorer_service import get_resources

resources_router = APIRouter(tags=["resources"])

_LOCATION_ID = Query(..., ge=1, description="Id of a location returned by /location")


async def _serve(
    kind: ResourceKind,
    location_id: int,
    session: AsyncSession,
    settings: Settings,
) -> list[BaseModel]:
    """Fetch a kind through the cache and translate engine errors to HTTP errors."""
    try:
        return await get_resources(session, settings, kind, location_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except GatewayError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"The {kind} provider is temporarily unavailable. Please retry later.",
        ) from e
    except StoreError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Resource store is temporarily unavailable.",
        ) from e


@resources_router.get("/weather", response_model=list[WeatherResponse], responses=ERROR_RESPONSES)
async def get_weather(
    location_id: int = _LOCATION_ID,
    session: AsyncSession = Depends(get_async_session),  # noqa: B008
    settings: Settings = Depends(get_settings),  # noqa: B008
) -> list[BaseModel]:
    """Daily forecast for a location (fresh for 15 seconds by default)."""
    return await _serve(ResourceKind.WEATHER, location_id, session, settings)


@resources_router.get("/events", response_model=list[EventResponse], responses=ERROR_RESPONSES)
async def get_events(
    location_id: int = _LOCATION_ID,
    session: AsyncSession = Depends(get_async_session),  # noqa: B008
    settings: Settings = Depends(get_settings),  # noqa: B008
) -> list[BaseModel]:
    """Upcoming events near a location (fresh for one hour by default)."""
    return await _serve(ResourceKind.EVENTS, location_id, session, settings)


@resources_router.get("/movies", response_model=list[MovieResponse], responses=ERROR_RESPONSES)
async def get_movies(
    location_id: int = _LOCATION_ID,
    session: AsyncSession = Depends(get_async_session),  # noqa: B008
    settings: Settings = Depends(get_settings),  # noqa: B008
) -> list[BaseModel]:
    """Films now playing (fresh for one day by default)."""
    return await _serve(ResourceKind.MOVIES, location_id, session, settings)


@resources_router.get("/yelp", response_model=list[ReviewResponse], responses=ERROR_RESPONSES)
async def get_reviews(
    location_id: int = _LOCATION_ID,
    session: AsyncSession = Depends(get_async_session),  # noqa: B008
    settings: Settings = Depends(get_settings),  # noqa: B008
) -> list[BaseModel]:
    """Local businesses and ratings for a location (fresh for four hours by default)."""
    return await _serve(ResourceKind.REVIEWS, location_id, session, settings)

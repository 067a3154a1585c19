"""Explorer service: wires settings and a session into the cache engine.

Route handlers and CLI commands call these functions; they never build
providers, policies, or stores themselves.
"""

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from city_explorer_api.core.config import Settings
from city_explorer_api.lib.cache import (
    MODELS,
    CacheAsideEngine,
    CacheStore,
    NotFoundError,
    ResourceKind,
    build_policies,
)
from city_explorer_api.lib.geocoder import get_configured_geocoder
from city_explorer_api.schemas.location import LocationResponse
from city_explorer_api.schemas.resources import (
    CachedResourceResponse,
    EventResponse,
    MovieResponse,
    ReviewResponse,
    WeatherResponse,
)

RESPONSE_SCHEMAS: dict[ResourceKind, type[CachedResourceResponse]] = {
    ResourceKind.WEATHER: WeatherResponse,
    ResourceKind.EVENTS: EventResponse,
    ResourceKind.MOVIES: MovieResponse,
    ResourceKind.REVIEWS: ReviewResponse,
}


def build_engine(session: AsyncSession, settings: Settings) -> CacheAsideEngine:
    """Create a cache engine bound to one session."""
    return CacheAsideEngine(
        store=CacheStore(session),
        geocoder=get_configured_geocoder(settings),
        policies=build_policies(settings),
    )


async def resolve_location(session: AsyncSession, settings: Settings, query: str) -> LocationResponse:
    """Resolve free-text search to a location, geocoding only unseen queries.

    Raises:
        NotFoundError: If the geocoder has no match for the query.
        GatewayError: If the geocoder call fails.
        StoreError: If the store is unavailable.
    """
    engine = build_engine(session, settings)
    location = await engine.resolve_location(query)
    return LocationResponse.model_validate(location)


async def get_resources(
    session: AsyncSession,
    settings: Settings,
    kind: ResourceKind,
    location_id: int,
) -> list[BaseModel]:
    """Return the cached (or freshly fetched) resources of a kind for a location.

    Raises:
        NotFoundError: If no location with ``location_id`` exists.
        GatewayError: If a required live fetch fails.
        StoreError: If the store is unavailable.
    """
    store = CacheStore(session)
    location = await store.get_location(location_id)
    if location is None:
        msg = f"Location {location_id} not found"
        raise NotFoundError(msg)

    rows = await build_engine(session, settings).fetch_cached(kind, location)
    schema = RESPONSE_SCHEMAS[kind]
    return [schema.model_validate(row) for row in rows]


async def explore(session: AsyncSession, settings: Settings, kind: ResourceKind, query: str) -> list[BaseModel]:
    """Resolve a query and return one kind of resource for it in a single call."""
    engine = build_engine(session, settings)
    location = await engine.resolve_location(query)
    rows = await engine.fetch_cached(kind, location)
    schema = RESPONSE_SCHEMAS[kind]
    return [schema.model_validate(row) for row in rows]


async def clear_cache(session: AsyncSession, kind: ResourceKind | None = None) -> dict[ResourceKind, int]:
    """Delete cached resource rows for one kind, or for all kinds.

    Locations are never cleared.

    Returns:
        Number of rows deleted per kind.
    """
    store = CacheStore(session)
    kinds = [kind] if kind is not None else list(ResourceKind)
    counts = {k: await store.delete_all(MODELS[k]) for k in kinds}
    await store.commit()
    return counts

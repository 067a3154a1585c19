"""Per-kind cache policies: which table, how long it stays fresh, who fetches it."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import timedelta
from typing import TYPE_CHECKING, Any

from city_explorer_api.lib.providers import BaseResourceProvider, get_provider
from city_explorer_api.models import Event, Movie, Review, Weather

if TYPE_CHECKING:
    from city_explorer_api.core.config import Settings

CachedResource = Weather | Event | Movie | Review


class ResourceKind(enum.StrEnum):
    """Resource kinds served from the location-keyed cache."""

    WEATHER = "weather"
    EVENTS = "events"
    MOVIES = "movies"
    REVIEWS = "reviews"


@dataclass(frozen=True)
class CachePolicy:
    """Everything the engine needs to serve one resource kind.

    Attributes:
        kind: The resource kind this policy serves.
        model: ORM model (table) the kind is cached in.
        ttl: How long a cached batch stays fresh, measured from its oldest row.
        provider: Gateway used on a miss or after eviction.
    """

    kind: ResourceKind
    model: type[CachedResource]
    ttl: timedelta
    provider: BaseResourceProvider[Any]


MODELS: dict[ResourceKind, type[CachedResource]] = {
    ResourceKind.WEATHER: Weather,
    ResourceKind.EVENTS: Event,
    ResourceKind.MOVIES: Movie,
    ResourceKind.REVIEWS: Review,
}


def ttl_for(kind: ResourceKind, settings: Settings) -> timedelta:
    """Return the configured freshness window for a kind."""
    seconds = {
        ResourceKind.WEATHER: settings.cache_ttl_weather,
        ResourceKind.EVENTS: settings.cache_ttl_events,
        ResourceKind.MOVIES: settings.cache_ttl_movies,
        ResourceKind.REVIEWS: settings.cache_ttl_reviews,
    }[kind]
    return timedelta(seconds=seconds)


def build_policies(settings: Settings) -> dict[ResourceKind, CachePolicy]:
    """Build the policy table for every resource kind from settings.

    Args:
        settings: Application settings (API keys, timeouts, TTLs).

    Returns:
        Mapping of kind to its CachePolicy.
    """
    timeout = settings.provider_timeout
    providers: dict[ResourceKind, BaseResourceProvider[Any]] = {
        ResourceKind.WEATHER: get_provider(
            "darksky",
            api_key=settings.weather_api_key,
            timeout=timeout,
            base_url=settings.weather_base_url,
        ),
        ResourceKind.EVENTS: get_provider("eventbrite", api_key=settings.eventbrite_api_key, timeout=timeout),
        ResourceKind.MOVIES: get_provider("tmdb", api_key=settings.movie_api_key, timeout=timeout),
        ResourceKind.REVIEWS: get_provider("yelp", api_key=settings.yelp_api_key, timeout=timeout),
    }
    return {
        kind: CachePolicy(kind=kind, model=MODELS[kind], ttl=ttl_for(kind, settings), provider=providers[kind])
        for kind in ResourceKind
    }

"""Resource providers: one live-fetch gateway per cached resource kind.

Public API:
    - BaseResourceProvider: Abstract provider interface
    - GatewayError: Provider-level error
    - WeatherRecord / EventRecord / MovieRecord / ReviewRecord: Normalized records
    - DarkSkyWeatherProvider, EventbriteProvider, TmdbMovieProvider, YelpReviewProvider
    - get_provider: Provider factory/registry
"""

from typing import Any

from city_explorer_api.lib.providers.base import BaseResourceProvider, GatewayError
from city_explorer_api.lib.providers.darksky import DarkSkyWeatherProvider
from city_explorer_api.lib.providers.eventbrite import EventbriteProvider
from city_explorer_api.lib.providers.records import (
    EventRecord,
    MovieRecord,
    NormalizedRecord,
    ReviewRecord,
    WeatherRecord,
    record_columns,
)
from city_explorer_api.lib.providers.tmdb import TmdbMovieProvider
from city_explorer_api.lib.providers.yelp import YelpReviewProvider

_PROVIDERS: dict[str, type[BaseResourceProvider[Any]]] = {
    "darksky": DarkSkyWeatherProvider,
    "eventbrite": EventbriteProvider,
    "tmdb": TmdbMovieProvider,
    "yelp": YelpReviewProvider,
}


def get_available_providers() -> list[str]:
    """Return the names of all registered resource providers."""
    return sorted(_PROVIDERS.keys())


def get_provider(name: str, **kwargs: Any) -> BaseResourceProvider[Any]:
    """Get a resource provider instance by name.

    Args:
        name: Provider name (e.g., "yelp").
        **kwargs: Arguments forwarded to the provider constructor
            (e.g., ``api_key=...``, ``timeout=2.0``).

    Returns:
        An instance of the requested provider.

    Raises:
        ValueError: If the provider is not registered.
    """
    cls = _PROVIDERS.get(name)
    if cls is None:
        msg = f"Unknown resource provider: {name!r}. Available: {list(_PROVIDERS.keys())}"
        raise ValueError(msg)
    return cls(**kwargs)


__all__ = [
    "BaseResourceProvider",
    "DarkSkyWeatherProvider",
    "EventRecord",
    "EventbriteProvider",
    "GatewayError",
    "MovieRecord",
    "NormalizedRecord",
    "ReviewRecord",
    "TmdbMovieProvider",
    "WeatherRecord",
    "YelpReviewProvider",
    "get_available_providers",
    "get_provider",
    "record_columns",
]

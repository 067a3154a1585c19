"""Geocoder library: resolves free-text location queries to coordinates.

Public API:
    - BaseGeocoder: Abstract provider interface
    - GeocodingResult: Result dataclass
    - GoogleMapsGeocoder: Google Maps provider
    - NominatimGeocoder: OpenStreetMap Nominatim provider
    - get_geocoder: Provider factory/registry
    - get_configured_geocoder: Build the geocoder selected in settings
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from city_explorer_api.lib.geocoder.base import BaseGeocoder, GeocodingResult
from city_explorer_api.lib.geocoder.google_maps import GoogleMapsGeocoder
from city_explorer_api.lib.geocoder.nominatim import NominatimGeocoder

if TYPE_CHECKING:
    from city_explorer_api.core.config import Settings

_PROVIDERS: dict[str, type[BaseGeocoder]] = {
    "google": GoogleMapsGeocoder,
    "nominatim": NominatimGeocoder,
}


def get_geocoder(provider: str = "google", **kwargs: Any) -> BaseGeocoder:
    """Get a geocoder instance by provider name.

    Args:
        provider: Provider name (e.g., "google").
        **kwargs: Additional arguments forwarded to the provider constructor.

    Returns:
        An instance of the requested geocoder provider.

    Raises:
        ValueError: If the provider is not registered.
    """
    cls = _PROVIDERS.get(provider)
    if cls is None:
        msg = f"Unknown geocoder provider: {provider!r}. Available: {list(_PROVIDERS.keys())}"
        raise ValueError(msg)
    return cls(**kwargs)


def get_configured_geocoder(settings: Settings) -> BaseGeocoder:
    """Build the geocoder named by ``settings.geocoder_provider``."""
    if settings.geocoder_provider == "google":
        return get_geocoder(
            "google",
            api_key=settings.geocode_api_key or "",
            timeout=settings.geocoder_google_timeout,
        )
    return get_geocoder(
        "nominatim",
        timeout=settings.geocoder_nominatim_timeout,
        email=settings.geocoder_nominatim_email,
    )


__all__ = [
    "BaseGeocoder",
    "GeocodingResult",
    "GoogleMapsGeocoder",
    "NominatimGeocoder",
    "get_configured_geocoder",
    "get_geocoder",
]

"""Abstract geocoder interface used to resolve free-text location queries."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from loguru import logger

from city_explorer_api.lib.providers.base import GatewayError


@dataclass
class GeocodingResult:
    """Best match returned by a geocoder for a search query."""

    latitude: float
    longitude: float
    formatted_address: str
    raw_response: dict | None = None

    def __post_init__(self) -> None:
        if not (-90 <= self.latitude <= 90):
            msg = f"latitude must be between -90 and 90, got {self.latitude}"
            raise ValueError(msg)
        if not (-180 <= self.longitude <= 180):
            msg = f"longitude must be between -180 and 180, got {self.longitude}"
            raise ValueError(msg)


class BaseGeocoder(ABC):
    """Abstract geocoder interface. All providers must implement this."""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Unique name identifying this geocoder provider."""

    @property
    def requires_api_key(self) -> bool:
        """Whether this provider requires an API key to function."""
        return False

    @property
    def is_configured(self) -> bool:
        """Whether this provider has all required configuration (e.g., API keys)."""
        return True

    @abstractmethod
    async def geocode(self, query: str) -> GeocodingResult | None:
        """Resolve a free-text query to its best match.

        Args:
            query: Search text as typed by the user.

        Returns:
            GeocodingResult, or None if the provider found no match.

        Raises:
            GatewayError: On transport, service, or parse errors.
        """

    def _malformed(self, detail: object) -> GatewayError:
        logger.warning(f"Failed to parse {self.provider_name} response: {detail}")
        return GatewayError(self.provider_name, f"Failed to parse response: {detail}")

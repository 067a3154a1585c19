"""Abstract resource-provider interface and the gateway error type."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, TypeVar

import httpx
from loguru import logger

if TYPE_CHECKING:
    from city_explorer_api.models.location import Location

DEFAULT_TIMEOUT = 10.0

RecordT = TypeVar("RecordT")


class GatewayError(Exception):
    """Raised when an external provider call fails or returns malformed data.

    Distinguishes provider failures (timeout, HTTP error, connection error,
    unparseable payload) from a successful response with no results, which
    providers report as an empty list.

    Args:
        provider_name: Name of the failing provider.
        message: Human-readable error description.
        status_code: Optional HTTP status code from the provider.
    """

    def __init__(self, provider_name: str, message: str, status_code: int | None = None) -> None:
        self.provider_name = provider_name
        self.message = message
        self.status_code = status_code
        super().__init__(f"{provider_name}: {message}")


async def get_json(
    provider_name: str,
    url: str,
    *,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> Any:
    """Issue a GET request and decode the JSON body.

    Every transport or decoding failure is re-raised as a GatewayError so
    callers only ever handle one error type.

    Raises:
        GatewayError: On timeout, HTTP error status, connection error,
            or a non-JSON body.
    """
    try:
        async with httpx.AsyncClient(timeout=timeout) as client:
            response = await client.get(url, params=params, headers=headers)
            response.raise_for_status()
        return response.json()
    except httpx.TimeoutException as e:
        logger.warning(f"{provider_name} request timed out")
        raise GatewayError(provider_name, "Request timed out") from e
    except httpx.HTTPStatusError as e:
        logger.warning(f"{provider_name} HTTP error {e.response.status_code}")
        raise GatewayError(
            provider_name,
            f"Provider returned HTTP {e.response.status_code}",
            status_code=e.response.status_code,
        ) from e
    except httpx.RequestError as e:
        logger.warning(f"{provider_name} connection error: {e}")
        raise GatewayError(provider_name, "Connection to provider failed") from e
    except ValueError as e:
        logger.warning(f"{provider_name} returned a non-JSON body")
        raise GatewayError(provider_name, "Provider returned invalid JSON") from e


class BaseResourceProvider(ABC, Generic[RecordT]):
    """Fetches one resource kind for a location from an external service.

    Providers never touch the database.  ``fetch`` returns normalized
    records; persisting them is the cache engine's job.
    """

    def __init__(self, api_key: str | None = None, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._api_key = api_key
        self._timeout = timeout

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Unique name identifying this provider."""

    @property
    def requires_api_key(self) -> bool:
        """Whether this provider requires an API key to function."""
        return True

    @property
    def is_configured(self) -> bool:
        """Whether this provider has all required configuration."""
        return bool(self._api_key) or not self.requires_api_key

    async def fetch(self, location: "Location") -> list[RecordT]:
        """Fetch normalized records for a location.

        Args:
            location: The resolved location to query for.

        Returns:
            Normalized records; an empty list when the provider found nothing.

        Raises:
            GatewayError: If the provider is unconfigured, unreachable, or
                returned a payload that cannot be parsed.
        """
        if not self.is_configured:
            raise GatewayError(self.provider_name, "API key is not configured")
        data = await self._request(location)
        return self._parse_response(data)

    @abstractmethod
    async def _request(self, location: "Location") -> Any:
        """Call the provider for a location and return the decoded payload."""

    @abstractmethod
    def _parse_response(self, data: Any) -> list[RecordT]:
        """Map a provider payload into normalized records.

        Raises:
            GatewayError: If required fields are missing or malformed.
        """

    def _required_text(self, item: Any, field: str) -> str:
        """Return a non-empty string field of a payload item, or raise GatewayError."""
        if not isinstance(item, dict):
            raise self._malformed(f"expected an object, got {type(item).__name__}")
        value = item.get(field)
        if not isinstance(value, str) or not value.strip():
            raise self._malformed(f"{field!r} is missing or empty")
        return value

    def _optional(self, item: dict, field: str, *types: type) -> Any:
        """Return an optional payload field, or raise GatewayError if it has the wrong type."""
        value = item.get(field)
        if value is None or (isinstance(value, types) and not isinstance(value, bool)):
            return value
        raise self._malformed(f"{field!r} has unexpected type {type(value).__name__}")

    def _malformed(self, detail: object) -> GatewayError:
        logger.warning(f"Failed to parse {self.provider_name} response: {detail}")
        return GatewayError(self.provider_name, f"Failed to parse response: {detail}")

"""Google Maps Geocoding API provider.

Uses the Google Maps Geocoding API
(https://developers.google.com/maps/documentation/geocoding/)
for query-to-coordinate resolution. Requires an API key.
"""

from typing import Any

from city_explorer_api.lib.geocoder.base import BaseGeocoder, GeocodingResult
from city_explorer_api.lib.providers.base import DEFAULT_TIMEOUT, GatewayError, get_json

GOOGLE_API_URL = "https://maps.googleapis.com/maps/api/geocode/json"


class GoogleMapsGeocoder(BaseGeocoder):
    """Google Maps geocoder provider."""

    def __init__(self, api_key: str, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._api_key = api_key
        self._timeout = timeout

    @property
    def provider_name(self) -> str:
        return "google"

    @property
    def requires_api_key(self) -> bool:
        return True

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    async def geocode(self, query: str) -> GeocodingResult | None:
        """Geocode a query using the Google Maps API.

        Args:
            query: Free-text location query.

        Returns:
            GeocodingResult or None if no match found.

        Raises:
            GatewayError: On transport, service, or API-specific errors.
        """
        if not self.is_configured:
            raise GatewayError(self.provider_name, "API key is not configured")
        data = await get_json(
            self.provider_name,
            GOOGLE_API_URL,
            params={"address": query, "key": self._api_key},
            timeout=self._timeout,
        )
        return self._parse_response(data)

    def _parse_response(self, data: Any) -> GeocodingResult | None:
        """Parse Google Maps API response into a GeocodingResult.

        Args:
            data: Raw JSON response from Google Maps API.

        Returns:
            GeocodingResult or None if no match found.

        Raises:
            GatewayError: On API-specific error statuses or a malformed result.
        """
        if not isinstance(data, dict):
            raise self._malformed(f"expected an object, got {type(data).__name__}")
        api_status = data.get("status", "UNKNOWN")

        if api_status == "ZERO_RESULTS":
            return None

        if api_status in ("REQUEST_DENIED", "OVER_QUERY_LIMIT", "INVALID_REQUEST"):
            msg = data.get("error_message", api_status)
            raise GatewayError(self.provider_name, f"API error: {msg}")

        if api_status != "OK":
            raise GatewayError(self.provider_name, f"Unexpected API status: {api_status}")

        results = data.get("results") or []
        if not isinstance(results, list):
            raise self._malformed("'results' is not a list")
        if not results:
            return None

        best = results[0]
        try:
            location = best["geometry"]["location"]
            formatted_address = best["formatted_address"]
            if not isinstance(formatted_address, str) or not formatted_address.strip():
                raise self._malformed("'formatted_address' is missing or empty")
            return GeocodingResult(
                latitude=float(location["lat"]),
                longitude=float(location["lng"]),
                formatted_address=formatted_address,
                raw_response=best,
            )
        except (KeyError, ValueError, TypeError) as e:
            raise self._malformed(e) from e

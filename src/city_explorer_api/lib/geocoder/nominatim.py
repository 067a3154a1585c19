"""OpenStreetMap Nominatim geocoder provider.

Uses the Nominatim API (https://nominatim.org/release-docs/develop/api/Search/).
Needs no API key, which makes it the fallback for keyless deployments.
"""

from typing import Any

from city_explorer_api.lib.geocoder.base import BaseGeocoder, GeocodingResult
from city_explorer_api.lib.providers.base import DEFAULT_TIMEOUT, get_json

NOMINATIM_API_URL = "https://nominatim.openstreetmap.org/search"
DEFAULT_USER_AGENT = "city-explorer-api/0.1"


class NominatimGeocoder(BaseGeocoder):
    """OpenStreetMap Nominatim geocoder provider."""

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        email: str = "",
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self._timeout = timeout
        self._email = email
        self._user_agent = user_agent

    @property
    def provider_name(self) -> str:
        return "nominatim"

    async def geocode(self, query: str) -> GeocodingResult | None:
        """Geocode a query using the Nominatim API.

        Raises:
            GatewayError: On transport or service errors.
        """
        params: dict[str, str | int] = {"q": query, "format": "json", "limit": 1}
        if self._email:
            params["email"] = self._email

        data = await get_json(
            self.provider_name,
            NOMINATIM_API_URL,
            params=params,
            headers={"User-Agent": self._user_agent},
            timeout=self._timeout,
        )
        return self._parse_response(data)

    def _parse_response(self, data: Any) -> GeocodingResult | None:
        if not isinstance(data, list):
            raise self._malformed(f"expected a list, got {type(data).__name__}")
        if not data:
            return None

        best = data[0]
        try:
            display_name = best["display_name"]
            if not isinstance(display_name, str) or not display_name.strip():
                raise self._malformed("'display_name' is missing or empty")
            return GeocodingResult(
                latitude=float(best["lat"]),
                longitude=float(best["lon"]),
                formatted_address=display_name,
                raw_response=best,
            )
        except (KeyError, ValueError, TypeError) as e:
            raise self._malformed(e) from e

"""Dark Sky compatible daily forecast provider.

Talks to any service exposing the Dark Sky ``/forecast/{key}/{lat},{lon}``
API (Pirate Weather by default) and keeps the ``daily`` block.
"""

from typing import TYPE_CHECKING, Any

from city_explorer_api.lib.providers.base import DEFAULT_TIMEOUT, BaseResourceProvider, get_json
from city_explorer_api.lib.providers.records import WeatherRecord, display_date_from_epoch

if TYPE_CHECKING:
    from city_explorer_api.models.location import Location

DEFAULT_BASE_URL = "https://api.pirateweather.net"


class DarkSkyWeatherProvider(BaseResourceProvider[WeatherRecord]):
    """Daily forecast summaries for a location's coordinates."""

    def __init__(
        self,
        api_key: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        base_url: str = DEFAULT_BASE_URL,
    ) -> None:
        super().__init__(api_key, timeout)
        self._base_url = base_url.rstrip("/")

    @property
    def provider_name(self) -> str:
        return "darksky"

    async def _request(self, location: "Location") -> Any:
        url = f"{self._base_url}/forecast/{self._api_key}/{location.latitude},{location.longitude}"
        return await get_json(self.provider_name, url, params={"exclude": "minutely,hourly"}, timeout=self._timeout)

    def _parse_response(self, data: Any) -> list[WeatherRecord]:
        try:
            days = data["daily"]["data"]
        except (KeyError, TypeError) as e:
            raise self._malformed(e) from e
        if not isinstance(days, list):
            raise self._malformed("'daily.data' is not a list")
        return [self._map_day(day) for day in days]

    def _map_day(self, day: Any) -> WeatherRecord:
        summary = self._required_text(day, "summary")
        try:
            time = display_date_from_epoch(float(day["time"]))
        except (KeyError, TypeError, ValueError, OverflowError, OSError) as e:
            raise self._malformed(e) from e
        return WeatherRecord(forecast=summary, time=time)

"""Eventbrite event search provider."""

from datetime import datetime
from typing import TYPE_CHECKING, Any

from city_explorer_api.lib.providers.base import BaseResourceProvider, get_json
from city_explorer_api.lib.providers.records import EventRecord, display_date

if TYPE_CHECKING:
    from city_explorer_api.models.location import Location

EVENTBRITE_SEARCH_URL = "https://www.eventbriteapi.com/v3/events/search"


class EventbriteProvider(BaseResourceProvider[EventRecord]):
    """Upcoming events near a location's formatted address."""

    @property
    def provider_name(self) -> str:
        return "eventbrite"

    async def _request(self, location: "Location") -> Any:
        return await get_json(
            self.provider_name,
            EVENTBRITE_SEARCH_URL,
            params={"location.address": location.formatted_query},
            headers={"Authorization": f"Bearer {self._api_key}"},
            timeout=self._timeout,
        )

    def _parse_response(self, data: Any) -> list[EventRecord]:
        try:
            events = data["events"]
        except (KeyError, TypeError) as e:
            raise self._malformed(e) from e
        if not isinstance(events, list):
            raise self._malformed("'events' is not a list")
        return [self._map_event(event) for event in events]

    def _map_event(self, event: Any) -> EventRecord:
        if not isinstance(event, dict):
            raise self._malformed(f"expected an object, got {type(event).__name__}")
        name = self._required_text(event.get("name"), "text")
        start = self._optional(event, "start", dict) or {}
        local = self._optional(start, "local", str)
        try:
            event_date = display_date(datetime.fromisoformat(local)) if local else None
        except ValueError as e:
            raise self._malformed(e) from e
        return EventRecord(
            link=self._optional(event, "url", str),
            name=name,
            event_date=event_date,
            summary=self._optional(event, "summary", str),
        )

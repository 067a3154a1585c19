"""Unit tests for the Eventbrite events provider."""

from unittest.mock import AsyncMock, patch

import httpx
import pytest

from city_explorer_api.lib.providers import EventbriteProvider, EventRecord, GatewayError
from city_explorer_api.models import Location

LOCATION = Location(search_query="seattle", formatted_query="Seattle, WA, USA", latitude=47.6062, longitude=-122.3321)


class TestEventbriteResponseParsing:
    def setup_method(self) -> None:
        self.provider = EventbriteProvider(api_key="test-key")

    def test_maps_events(self) -> None:
        data = {
            "events": [
                {
                    "url": "https://www.eventbrite.com/e/1",
                    "name": {"text": "Jazz Night"},
                    "start": {"local": "2024-01-05T19:30:00"},
                    "summary": "Live music downtown",
                },
                {"name": {"text": "Book Fair"}},
            ]
        }

        assert self.provider._parse_response(data) == [
            EventRecord(
                name="Jazz Night",
                link="https://www.eventbrite.com/e/1",
                event_date="Fri Jan 05 2024",
                summary="Live music downtown",
            ),
            EventRecord(name="Book Fair"),
        ]

    def test_no_events(self) -> None:
        assert self.provider._parse_response({"events": []}) == []

    def test_missing_name_raises(self) -> None:
        with pytest.raises(GatewayError, match="Failed to parse"):
            self.provider._parse_response({"events": [{"url": "https://x"}]})

    @pytest.mark.parametrize(
        "event",
        [
            {"name": {"text": None}},
            {"name": "Jazz Night"},
            {"name": {"text": "Jazz Night"}, "start": "2024-01-05T19:30:00"},
            {"name": {"text": "Jazz Night"}, "summary": ["live"]},
            7,
        ],
    )
    def test_malformed_event_raises(self, event: object) -> None:
        with pytest.raises(GatewayError, match="Failed to parse"):
            self.provider._parse_response({"events": [event]})

    def test_bad_start_date_raises(self) -> None:
        with pytest.raises(GatewayError, match="Failed to parse"):
            self.provider._parse_response({"events": [{"name": {"text": "x"}, "start": {"local": "soon"}}]})


class TestEventbriteFetch:
    async def test_searches_by_formatted_address(self) -> None:
        provider = EventbriteProvider(api_key="token")
        response = httpx.Response(200, json={"events": []}, request=httpx.Request("GET", "https://eventbrite"))

        with patch("httpx.AsyncClient.get", new_callable=AsyncMock, return_value=response) as mock_get:
            assert await provider.fetch(LOCATION) == []

        assert mock_get.call_args.kwargs["params"] == {"location.address": "Seattle, WA, USA"}
        assert mock_get.call_args.kwargs["headers"] == {"Authorization": "Bearer token"}

    async def test_http_error(self) -> None:
        provider = EventbriteProvider(api_key="token")
        response = httpx.Response(500, request=httpx.Request("GET", "https://eventbrite"))

        with (
            patch("httpx.AsyncClient.get", new_callable=AsyncMock, return_value=response),
            pytest.raises(GatewayError, match="eventbrite"),
        ):
            await provider.fetch(LOCATION)

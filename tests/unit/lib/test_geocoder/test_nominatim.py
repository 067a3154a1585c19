"""Unit tests for the Nominatim geocoder provider."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from city_explorer_api.lib.geocoder.nominatim import NominatimGeocoder
from city_explorer_api.lib.providers.base import GatewayError


class TestNominatimResponseParsing:
    def setup_method(self) -> None:
        self.geocoder = NominatimGeocoder()

    def test_successful_match(self) -> None:
        data = [{"lat": "47.6038321", "lon": "-122.330062", "display_name": "Seattle, King County, Washington"}]
        result = self.geocoder._parse_response(data)
        assert result is not None
        assert result.latitude == pytest.approx(47.6038321)
        assert result.longitude == pytest.approx(-122.330062)
        assert result.formatted_address == "Seattle, King County, Washington"

    def test_empty_list(self) -> None:
        assert self.geocoder._parse_response([]) is None

    def test_non_numeric_coordinates_raise(self) -> None:
        with pytest.raises(GatewayError, match="Failed to parse"):
            self.geocoder._parse_response([{"lat": "north", "lon": "0", "display_name": "x"}])

    def test_object_payload_raises(self) -> None:
        with pytest.raises(GatewayError, match="Failed to parse"):
            self.geocoder._parse_response({"error": "Unable to geocode"})

    def test_missing_display_name_raises(self) -> None:
        with pytest.raises(GatewayError, match="Failed to parse"):
            self.geocoder._parse_response([{"lat": "47.6", "lon": "-122.3", "display_name": None}])


class TestNominatimRequest:
    async def test_sends_user_agent_and_email(self) -> None:
        geocoder = NominatimGeocoder(email="ops@example.com")
        mock_response = MagicMock()
        mock_response.json.return_value = []
        mock_response.raise_for_status = MagicMock()

        with patch("httpx.AsyncClient.get", new_callable=AsyncMock, return_value=mock_response) as mock_get:
            assert await geocoder.geocode("nowhere at all") is None

        kwargs = mock_get.call_args.kwargs
        assert kwargs["params"] == {"q": "nowhere at all", "format": "json", "limit": 1, "email": "ops@example.com"}
        assert kwargs["headers"]["User-Agent"].startswith("city-explorer-api/")

    def test_needs_no_key(self) -> None:
        geocoder = NominatimGeocoder()
        assert geocoder.requires_api_key is False
        assert geocoder.is_configured is True

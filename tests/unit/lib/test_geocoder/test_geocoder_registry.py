"""Unit tests for geocoder selection."""

import pytest

from city_explorer_api.core.config import Settings
from city_explorer_api.lib.geocoder import (
    GeocodingResult,
    GoogleMapsGeocoder,
    NominatimGeocoder,
    get_configured_geocoder,
    get_geocoder,
)


class TestGetGeocoder:
    def test_default_is_google(self) -> None:
        assert isinstance(get_geocoder(api_key="k"), GoogleMapsGeocoder)

    def test_nominatim(self) -> None:
        assert isinstance(get_geocoder("nominatim"), NominatimGeocoder)

    def test_unknown_provider(self) -> None:
        with pytest.raises(ValueError, match="Unknown geocoder provider"):
            get_geocoder("bing")


class TestGetConfiguredGeocoder:
    def test_google_from_settings(self, settings: Settings) -> None:
        geocoder = get_configured_geocoder(settings)
        assert isinstance(geocoder, GoogleMapsGeocoder)
        assert geocoder.is_configured is True

    def test_google_without_key_is_unconfigured(self, settings: Settings) -> None:
        geocoder = get_configured_geocoder(settings.model_copy(update={"geocode_api_key": None}))
        assert geocoder.is_configured is False

    def test_nominatim_from_settings(self, settings: Settings) -> None:
        geocoder = get_configured_geocoder(settings.model_copy(update={"geocoder_provider": "nominatim"}))
        assert isinstance(geocoder, NominatimGeocoder)


class TestGeocodingResult:
    def test_rejects_latitude_out_of_range(self) -> None:
        with pytest.raises(ValueError, match="latitude"):
            GeocodingResult(latitude=91.0, longitude=0.0, formatted_address="x")

    def test_rejects_longitude_out_of_range(self) -> None:
        with pytest.raises(ValueError, match="longitude"):
            GeocodingResult(latitude=0.0, longitude=-181.0, formatted_address="x")

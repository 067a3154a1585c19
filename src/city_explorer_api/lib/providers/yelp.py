"""Yelp Fusion business search provider."""

from typing import TYPE_CHECKING, Any

from city_explorer_api.lib.providers.base import BaseResourceProvider, get_json
from city_explorer_api.lib.providers.records import ReviewRecord

if TYPE_CHECKING:
    from city_explorer_api.models.location import Location

YELP_SEARCH_URL = "https://api.yelp.com/v3/businesses/search"


class YelpReviewProvider(BaseResourceProvider[ReviewRecord]):
    """Local businesses and their ratings for the searched place."""

    @property
    def provider_name(self) -> str:
        return "yelp"

    async def _request(self, location: "Location") -> Any:
        # Yelp resolves the free-text query itself, so the original search wins
        # over the geocoder's formatted address.
        return await get_json(
            self.provider_name,
            YELP_SEARCH_URL,
            params={"location": location.search_query},
            headers={"Authorization": f"Bearer {self._api_key}"},
            timeout=self._timeout,
        )

    def _parse_response(self, data: Any) -> list[ReviewRecord]:
        try:
            businesses = data["businesses"]
        except (KeyError, TypeError) as e:
            raise self._malformed(e) from e
        if not isinstance(businesses, list):
            raise self._malformed("'businesses' is not a list")
        return [self._map_business(business) for business in businesses]

    def _map_business(self, business: Any) -> ReviewRecord:
        name = self._required_text(business, "name")
        return ReviewRecord(
            name=name,
            rating=self._optional(business, "rating", int, float),
            price=self._optional(business, "price", str),
            url=self._optional(business, "url", str),
            image_url=self._optional(business, "image_url", str),
        )

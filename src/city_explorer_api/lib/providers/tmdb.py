"""The Movie Database (TMDB) now-playing provider.

TMDB's now-playing list is not geographic; every location receives the
same batch, cached per location like any other resource.
"""

from typing import TYPE_CHECKING, Any

from city_explorer_api.lib.providers.base import BaseResourceProvider, get_json
from city_explorer_api.lib.providers.records import MovieRecord

if TYPE_CHECKING:
    from city_explorer_api.models.location import Location

TMDB_NOW_PLAYING_URL = "https://api.themoviedb.org/3/movie/now_playing"
TMDB_IMAGE_BASE_URL = "https://image.tmdb.org/t/p/original"


class TmdbMovieProvider(BaseResourceProvider[MovieRecord]):
    """Films currently in theaters."""

    @property
    def provider_name(self) -> str:
        return "tmdb"

    async def _request(self, location: "Location") -> Any:
        params = {"api_key": self._api_key, "language": "en-US", "page": 1}
        return await get_json(self.provider_name, TMDB_NOW_PLAYING_URL, params=params, timeout=self._timeout)

    def _parse_response(self, data: Any) -> list[MovieRecord]:
        try:
            movies = data["results"]
        except (KeyError, TypeError) as e:
            raise self._malformed(e) from e
        if not isinstance(movies, list):
            raise self._malformed("'results' is not a list")
        return [self._map_movie(movie) for movie in movies]

    def _map_movie(self, movie: Any) -> MovieRecord:
        title = self._required_text(movie, "title")
        poster_path = self._optional(movie, "poster_path", str)
        return MovieRecord(
            title=title,
            released_on=self._optional(movie, "release_date", str),
            total_votes=self._optional(movie, "vote_count", int),
            average_votes=self._optional(movie, "vote_average", int, float),
            popularity=self._optional(movie, "popularity", int, float),
            overview=self._optional(movie, "overview", str),
            image_url=f"{TMDB_IMAGE_BASE_URL}{poster_path}" if poster_path else None,
        )

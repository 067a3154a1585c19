"""ORM model registry: import all models so Alembic autogenerate discovers them."""

from city_explorer_api.models.event import Event
from city_explorer_api.models.location import Location
from city_explorer_api.models.movie import Movie
from city_explorer_api.models.review import Review
from city_explorer_api.models.weather import Weather

__all__ = [
    "Event",
    "Location",
    "Movie",
    "Review",
    "Weather",
]

"""Normalized records produced by resource providers.

Providers parse their raw payloads into these shapes so the cache engine
can persist them without knowing anything about the provider.  Field names
match the columns of the corresponding ORM model.
"""

from dataclasses import asdict, dataclass
from datetime import UTC, datetime
from typing import Any

DISPLAY_DATE_FORMAT = "%a %b %d %Y"


def display_date(value: datetime) -> str:
    """Render a date the way the API reports it (e.g. ``Mon Jan 01 2024``)."""
    return value.strftime(DISPLAY_DATE_FORMAT)


def display_date_from_epoch(seconds: float) -> str:
    """Render a Unix timestamp (seconds, UTC) as a display date."""
    return display_date(datetime.fromtimestamp(seconds, UTC))


@dataclass(frozen=True)
class WeatherRecord:
    """One day of forecast."""

    forecast: str
    time: str


@dataclass(frozen=True)
class EventRecord:
    """An upcoming event."""

    name: str
    link: str | None = None
    event_date: str | None = None
    summary: str | None = None


@dataclass(frozen=True)
class MovieRecord:
    """A film currently playing."""

    title: str
    released_on: str | None = None
    total_votes: int | None = None
    average_votes: float | None = None
    popularity: float | None = None
    overview: str | None = None
    image_url: str | None = None


@dataclass(frozen=True)
class ReviewRecord:
    """A local business with its rating."""

    name: str
    rating: float | None = None
    price: str | None = None
    url: str | None = None
    image_url: str | None = None


NormalizedRecord = WeatherRecord | EventRecord | MovieRecord | ReviewRecord


def record_columns(record: NormalizedRecord) -> dict[str, Any]:
    """Return a record's fields as ORM column values."""
    return asdict(record)

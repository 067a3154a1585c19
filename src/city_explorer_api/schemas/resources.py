"""Pydantic v2 schemas for cached resource records.

The same schema is used whether a row came from the cache or from a live
fetch, so clients always see the stored id and ``created_at``.
"""

from datetime import datetime

from pydantic import BaseModel


class CachedResourceResponse(BaseModel):
    """Fields shared by every cached resource."""

    model_config = {"from_attributes": True}

    id: int
    location_id: int
    created_at: datetime


class WeatherResponse(CachedResourceResponse):
    forecast: str
    time: str


class EventResponse(CachedResourceResponse):
    link: str | None = None
    name: str
    event_date: str | None = None
    summary: str | None = None


class MovieResponse(CachedResourceResponse):
    title: str
    released_on: str | None = None
    total_votes: int | None = None
    average_votes: float | None = None
    popularity: float | None = None
    overview: str | None = None
    image_url: str | None = None


class ReviewResponse(CachedResourceResponse):
    name: str
    rating: float | None = None
    price: str | None = None
    url: str | None = None
    image_url: str | None = None

"""Pydantic v2 schemas for resolved locations."""

from pydantic import BaseModel


class LocationResponse(BaseModel):
    """A resolved location, as returned to API clients."""

    model_config = {"from_attributes": True}

    id: int
    search_query: str
    formatted_query: str
    latitude: float
    longitude: float

"""Location model: a geocoded search query."""

from sqlalchemy import Double, String
from sqlalchemy.orm import Mapped, mapped_column

from city_explorer_api.models.base import Base, IntegerIdMixin


class Location(Base, IntegerIdMixin):
    """A resolved location keyed by the exact text that was searched.

    Rows are written once on the first resolution of a query and are never
    updated or expired.  ``search_query`` is indexed but not
    unique: two concurrent first resolutions may both insert.
    """

    __tablename__ = "locations"

    search_query: Mapped[str] = mapped_column(String(500), nullable=False, index=True)
    formatted_query: Mapped[str] = mapped_column(String, nullable=False)
    latitude: Mapped[float] = mapped_column(Double, nullable=False)
    longitude: Mapped[float] = mapped_column(Double, nullable=False)

"""Weather model: one day of a cached forecast."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from city_explorer_api.models.base import Base, CachedResourceMixin


class Weather(Base, CachedResourceMixin):
    """Daily forecast summary for a location."""

    __tablename__ = "weathers"

    forecast: Mapped[str] = mapped_column(Text, nullable=False)
    time: Mapped[str] = mapped_column(String(32), nullable=False)

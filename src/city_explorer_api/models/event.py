"""Event model: a cached upcoming event near a location."""

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from city_explorer_api.models.base import Base, CachedResourceMixin


class Event(Base, CachedResourceMixin):
    """An event listing returned by the events provider."""

    __tablename__ = "events"

    link: Mapped[str | None] = mapped_column(Text, nullable=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    event_date: Mapped[str | None] = mapped_column(Text, nullable=True)
    summary: Mapped[str | None] = mapped_column(Text, nullable=True)

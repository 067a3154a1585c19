"""Movie model: a cached now-playing film."""

from sqlalchemy import Double, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from city_explorer_api.models.base import Base, CachedResourceMixin


class Movie(Base, CachedResourceMixin):
    """A film currently in theaters, as reported by the movie provider."""

    __tablename__ = "movies"

    title: Mapped[str] = mapped_column(Text, nullable=False)
    released_on: Mapped[str | None] = mapped_column(Text, nullable=True)
    total_votes: Mapped[int | None] = mapped_column(Integer, nullable=True)
    average_votes: Mapped[float | None] = mapped_column(Double, nullable=True)
    popularity: Mapped[float | None] = mapped_column(Double, nullable=True)
    overview: Mapped[str | None] = mapped_column(Text, nullable=True)
    image_url: Mapped[str | None] = mapped_column(Text, nullable=True)

"""Review model: a cached local business rating."""

from sqlalchemy import Double, Text
from sqlalchemy.orm import Mapped, mapped_column

from city_explorer_api.models.base import Base, CachedResourceMixin


class Review(Base, CachedResourceMixin):
    """A local business and its aggregate rating from the reviews provider."""

    __tablename__ = "yelps"

    name: Mapped[str] = mapped_column(Text, nullable=False)
    rating: Mapped[float | None] = mapped_column(Double, nullable=True)
    price: Mapped[str | None] = mapped_column(Text, nullable=True)
    url: Mapped[str | None] = mapped_column(Text, nullable=True)
    image_url: Mapped[str | None] = mapped_column(Text, nullable=True)

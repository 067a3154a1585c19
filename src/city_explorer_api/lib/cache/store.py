"""Persistent store adapter for locations and cached resource batches.

Wraps an injected ``AsyncSession``.  Every operation either succeeds or
rolls the session back and raises ``StoreError``; callers never see raw
SQLAlchemy exceptions.  Writes are flushed, not committed: the engine decides
where a unit of work ends by calling ``commit``.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import datetime

from loguru import logger
from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from city_explorer_api.lib.cache.errors import StoreError
from city_explorer_api.lib.cache.policy import CachedResource
from city_explorer_api.lib.providers.records import NormalizedRecord, record_columns
from city_explorer_api.models.location import Location


class CacheStore:
    """Structured lookup/insert/delete operations keyed by location."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @asynccontextmanager
    async def _guard(self, operation: str) -> AsyncIterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            logger.error(f"Store operation {operation} failed: {e}")
            await self._session.rollback()
            raise StoreError(operation, str(e)) from e

    async def find_by_location(self, model: type[CachedResource], location_id: int) -> list[CachedResource]:
        """Return every cached row of a kind for a location, oldest insert first."""
        async with self._guard("find_by_location"):
            result = await self._session.execute(
                select(model).where(model.location_id == location_id).order_by(model.id)
            )
            return list(result.scalars().all())

    async def delete_by_location(self, model: type[CachedResource], location_id: int) -> int:
        """Delete every cached row of a kind for a location.

        Returns:
            Number of rows deleted.
        """
        async with self._guard("delete_by_location"):
            result = await self._session.execute(delete(model).where(model.location_id == location_id))
            return result.rowcount or 0

    async def delete_all(self, model: type[CachedResource]) -> int:
        """Delete every cached row of a kind, across all locations."""
        async with self._guard("delete_all"):
            result = await self._session.execute(delete(model))
            return result.rowcount or 0

    async def insert(
        self,
        model: type[CachedResource],
        record: NormalizedRecord,
        location_id: int,
        created_at: datetime,
    ) -> CachedResource:
        """Persist one normalized record and return the row with its assigned id."""
        async with self._guard("insert"):
            row = model(**record_columns(record), location_id=location_id, created_at=created_at)
            self._session.add(row)
            await self._session.flush()
            return row

    async def find_location_by_search_text(self, search_text: str) -> list[Location]:
        """Return locations stored under an exact search text, oldest first."""
        async with self._guard("find_location_by_search_text"):
            result = await self._session.execute(
                select(Location).where(Location.search_query == search_text).order_by(Location.id)
            )
            return list(result.scalars().all())

    async def insert_location(self, location: Location) -> Location:
        """Persist a new location and return it with its assigned id."""
        async with self._guard("insert_location"):
            self._session.add(location)
            await self._session.flush()
            return location

    async def get_location(self, location_id: int) -> Location | None:
        """Return a location by id, or None if it does not exist."""
        async with self._guard("get_location"):
            return await self._session.get(Location, location_id)

    async def commit(self) -> None:
        """Commit the current unit of work."""
        async with self._guard("commit"):
            await self._session.commit()

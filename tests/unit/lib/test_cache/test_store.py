"""Unit tests for the cache store adapter."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from city_explorer_api.lib.cache import CacheStore, StoreError
from city_explorer_api.lib.providers.records import MovieRecord, WeatherRecord
from city_explorer_api.models import Location, Movie, Weather

NOW = datetime(2024, 1, 1, tzinfo=UTC)


class TestResourceOperations:
    async def test_insert_assigns_id_and_copies_fields(self, async_session: AsyncSession, seattle: Location) -> None:
        store = CacheStore(async_session)
        record = MovieRecord(title="Arrival", released_on="2016-11-11", total_votes=10, average_votes=7.9)

        row = await store.insert(Movie, record, seattle.id, NOW)

        assert isinstance(row, Movie)
        assert row.id is not None
        assert row.title == "Arrival"
        assert row.average_votes == pytest.approx(7.9)
        assert row.location_id == seattle.id
        assert row.created_at == NOW

    async def test_find_by_location_returns_rows_ordered_by_id(
        self, async_session: AsyncSession, seattle: Location
    ) -> None:
        store = CacheStore(async_session)
        for day in ("Mon", "Tue", "Wed"):
            await store.insert(Weather, WeatherRecord(forecast=day, time=f"{day} Jan 01 2024"), seattle.id, NOW)
        await store.commit()

        rows = await store.find_by_location(Weather, seattle.id)

        assert [r.forecast for r in rows] == ["Mon", "Tue", "Wed"]
        assert [r.id for r in rows] == sorted(r.id for r in rows)

    async def test_find_by_location_empty(self, async_session: AsyncSession, seattle: Location) -> None:
        assert await CacheStore(async_session).find_by_location(Weather, seattle.id) == []

    async def test_delete_by_location_only_touches_that_location(
        self, async_session: AsyncSession, seattle: Location
    ) -> None:
        other = Location(search_query="tacoma", formatted_query="Tacoma, WA, USA", latitude=47.25, longitude=-122.44)
        async_session.add(other)
        await async_session.flush()
        store = CacheStore(async_session)
        await store.insert(Weather, WeatherRecord(forecast="a", time="t"), seattle.id, NOW)
        await store.insert(Weather, WeatherRecord(forecast="b", time="t"), seattle.id, NOW)
        await store.insert(Weather, WeatherRecord(forecast="c", time="t"), other.id, NOW)
        await store.commit()

        deleted = await store.delete_by_location(Weather, seattle.id)
        await store.commit()

        assert deleted == 2
        assert await store.find_by_location(Weather, seattle.id) == []
        assert [r.forecast for r in await store.find_by_location(Weather, other.id)] == ["c"]

    async def test_delete_all(self, async_session: AsyncSession, seattle: Location) -> None:
        store = CacheStore(async_session)
        await store.insert(Movie, MovieRecord(title="Arrival"), seattle.id, NOW)
        await store.insert(Movie, MovieRecord(title="Heat"), seattle.id, NOW)
        await store.commit()

        assert await store.delete_all(Movie) == 2
        assert await store.find_by_location(Movie, seattle.id) == []


class TestLocationOperations:
    async def test_insert_and_find_by_search_text(self, async_session: AsyncSession) -> None:
        store = CacheStore(async_session)
        location = Location(search_query="lynnwood", formatted_query="Lynnwood, WA, USA", latitude=47.8, longitude=-122.3)

        saved = await store.insert_location(location)
        await store.commit()

        assert saved.id is not None
        found = await store.find_location_by_search_text("lynnwood")
        assert [f.id for f in found] == [saved.id]
        assert await store.find_location_by_search_text("Lynnwood") == []

    async def test_get_location(self, async_session: AsyncSession, seattle: Location) -> None:
        store = CacheStore(async_session)
        assert (await store.get_location(seattle.id)).formatted_query == "Seattle, WA, USA"
        assert await store.get_location(9999) is None


class TestStoreErrors:
    async def test_sqlalchemy_error_becomes_store_error_and_rolls_back(self) -> None:
        session = AsyncMock()
        session.execute.side_effect = OperationalError("SELECT", {}, Exception("database is locked"))
        store = CacheStore(session)

        with pytest.raises(StoreError, match="find_by_location"):
            await store.find_by_location(Weather, 1)

        session.rollback.assert_awaited_once()

    async def test_commit_failure_becomes_store_error(self) -> None:
        session = AsyncMock()
        session.commit.side_effect = OperationalError("COMMIT", {}, Exception("disk I/O error"))

        with pytest.raises(StoreError) as exc_info:
            await CacheStore(session).commit()

        assert exc_info.value.operation == "commit"
        session.rollback.assert_awaited_once()


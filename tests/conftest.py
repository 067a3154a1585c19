"""Shared test fixtures for settings, the async database, and sessions."""

from collections.abc import AsyncGenerator

import pytest
from fakes import FakeClock
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from city_explorer_api.core.config import Settings
from city_explorer_api.models.base import Base
from city_explorer_api.models.location import Location


@pytest.fixture
def settings() -> Settings:
    """Test application settings with every provider configured."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        database_url="sqlite+aiosqlite:///:memory:",
        geocoder_provider="google",
        geocode_api_key="test-geocode-key",
        weather_api_key="test-weather-key",
        eventbrite_api_key="test-eventbrite-key",
        movie_api_key="test-movie-key",
        yelp_api_key="test-yelp-key",
    )


@pytest.fixture
async def async_engine() -> AsyncGenerator[AsyncEngine]:
    """Create an in-memory async SQLite engine for testing."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def async_session(async_engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Create a per-test async session."""
    session_factory = async_sessionmaker(async_engine, expire_on_commit=False)
    async with session_factory() as session:
        yield session


@pytest.fixture
async def seattle(async_session: AsyncSession) -> Location:
    """A persisted location for resource cache tests."""
    location = Location(
        search_query="seattle",
        formatted_query="Seattle, WA, USA",
        latitude=47.6062095,
        longitude=-122.3320708,
    )
    async_session.add(location)
    await async_session.commit()
    return location


@pytest.fixture
def clock() -> FakeClock:
    """Manually advanced clock starting at a fixed UTC instant."""
    return FakeClock()

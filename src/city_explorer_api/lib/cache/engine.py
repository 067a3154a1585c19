"""Cache-aside engine with per-kind freshness windows.

For every resource kind the engine runs the same protocol:

1. Look up the cached batch for ``(kind, location)``.
2. If the batch exists and its oldest row is no older than the kind's TTL,
   return it unchanged.
3. If it is older, delete the whole batch and commit the eviction.
4. Fetch from the kind's provider, persist every returned record with one
   shared ``created_at``, commit, and return the new rows.

Location resolution is cached separately by exact search text and never
expires.

The engine keeps no state between calls.  Nothing serializes concurrent
misses for the same key: two requests that both see a missing or stale batch
will both fetch and both persist, leaving duplicate rows until the next
eviction.  An empty provider result persists nothing, so the next call
fetches again.
"""

from collections.abc import Callable, Mapping, Sequence
from datetime import UTC, datetime, timedelta

from loguru import logger

from city_explorer_api.lib.cache.errors import NotFoundError
from city_explorer_api.lib.cache.policy import CachedResource, CachePolicy, ResourceKind
from city_explorer_api.lib.cache.store import CacheStore
from city_explorer_api.lib.geocoder.base import BaseGeocoder
from city_explorer_api.models.location import Location


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


def batch_age(rows: Sequence[CachedResource], now: datetime) -> timedelta:
    """Age of a cached batch, measured from its oldest row."""
    return now - min(row.created_at for row in rows)


class CacheAsideEngine:
    """Serves locations and location-keyed resources from the store or live providers.

    Args:
        store: Store adapter bound to the caller's session.
        geocoder: Gateway used to resolve unseen search text.
        policies: Policy per resource kind.
        clock: Returns the current aware datetime; injectable for tests.
    """

    def __init__(
        self,
        store: CacheStore,
        geocoder: BaseGeocoder,
        policies: Mapping[ResourceKind, CachePolicy],
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._store = store
        self._geocoder = geocoder
        self._policies = policies
        self._clock = clock

    def policy(self, kind: ResourceKind | str) -> CachePolicy:
        """Return the policy for a kind.

        Raises:
            ValueError: If the kind is unknown or has no policy.
        """
        try:
            return self._policies[ResourceKind(kind)]
        except (KeyError, ValueError) as e:
            msg = f"Unknown resource kind: {kind!r}"
            raise ValueError(msg) from e

    async def resolve_location(self, search_text: str) -> Location:
        """Resolve search text to a persisted location.

        A previously resolved query is returned from the store without
        consulting the geocoder.

        Raises:
            NotFoundError: If the geocoder has no match; nothing is persisted.
            GatewayError: If the geocoder call fails.
            StoreError: If a store operation fails.
        """
        existing = await self._store.find_location_by_search_text(search_text)
        if existing:
            logger.debug(f"Location cache hit for query {search_text!r}")
            return existing[0]

        logger.info(f"Location cache miss for query {search_text!r}; geocoding with {self._geocoder.provider_name}")
        result = await self._geocoder.geocode(search_text)
        if result is None:
            msg = f"No location for query {search_text!r}"
            raise NotFoundError(msg)

        location = Location(
            search_query=search_text,
            formatted_query=result.formatted_address,
            latitude=result.latitude,
            longitude=result.longitude,
        )
        await self._store.insert_location(location)
        await self._store.commit()
        return location

    async def fetch_cached(self, kind: ResourceKind | str, location: Location) -> list[CachedResource]:
        """Return the resource batch of a kind for a location, fetching if missing or stale.

        Raises:
            ValueError: If the kind is unknown or the location is not persisted.
            GatewayError: If a required live fetch fails.
            StoreError: If a store operation fails.
        """
        policy = self.policy(kind)
        if location.id is None:
            msg = "Location must be persisted before its resources can be cached"
            raise ValueError(msg)

        rows = await self._store.find_by_location(policy.model, location.id)
        if rows:
            age = batch_age(rows, self._clock())
            if age <= policy.ttl:
                logger.debug(f"{policy.kind} cache hit for location {location.id} (age {age})")
                return rows
            deleted = await self._store.delete_by_location(policy.model, location.id)
            await self._store.commit()
            logger.info(f"{policy.kind} cache stale for location {location.id} (age {age}); evicted {deleted} rows")
        else:
            logger.info(f"{policy.kind} cache miss for location {location.id}")

        return await self._refresh(policy, location)

    async def _refresh(self, policy: CachePolicy, location: Location) -> list[CachedResource]:
        records = await policy.provider.fetch(location)
        created_at = self._clock().astimezone(UTC)
        rows = [await self._store.insert(policy.model, record, location.id, created_at) for record in records]
        await self._store.commit()
        logger.info(f"Stored {len(rows)} {policy.kind} rows from {policy.provider.provider_name} for location {location.id}")
        return rows

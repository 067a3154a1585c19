"""Cache-aside engine for location-keyed resources.

Public API:
    - CacheAsideEngine: Lookup → freshness → evict → fetch → persist → return
    - CacheStore: Persistent store adapter over an AsyncSession
    - CachePolicy / ResourceKind: Per-kind table, TTL, and provider
    - build_policies: Build every kind's policy from settings
    - NotFoundError / GatewayError / StoreError: Error kinds
"""

from city_explorer_api.lib.cache.engine import CacheAsideEngine, batch_age, utcnow
from city_explorer_api.lib.cache.errors import GatewayError, NotFoundError, StoreError
from city_explorer_api.lib.cache.policy import (
    MODELS,
    CachedResource,
    CachePolicy,
    ResourceKind,
    build_policies,
    ttl_for,
)
from city_explorer_api.lib.cache.store import CacheStore

__all__ = [
    "MODELS",
    "CacheAsideEngine",
    "CachePolicy",
    "CacheStore",
    "CachedResource",
    "GatewayError",
    "NotFoundError",
    "ResourceKind",
    "StoreError",
    "batch_age",
    "build_policies",
    "ttl_for",
    "utcnow",
]

"""
Redis response cache for the HTTP layer.

The proximity core owns no cache; route handlers may wrap a search in
``QueryCache.get_or_set`` to serve repeated identical requests from Redis.
Entries are JSON strings stored with ``SET EX``.  A Redis outage degrades
to uncached reads rather than failing the request.
"""

from __future__ import annotations

import enum
import logging
from typing import Awaitable, Callable, Optional

import redis.asyncio as aioredis
from redis.exceptions import RedisError

logger = logging.getLogger(__name__)


class CacheStrategy(int, enum.Enum):
    """TTL presets in seconds."""

    SHORT = 60  # frequently changing data
    MEDIUM = 300  # restaurant searches
    LONG = 1800  # airport data


def create_redis(url: str) -> aioredis.Redis:
    return aioredis.Redis.from_url(url, decode_responses=True)


class QueryCache:
    def __init__(self, client: aioredis.Redis, prefix: str = "gaeats"):
        self.redis = client
        self.prefix = prefix

    def make_key(self, namespace: str, **params) -> str:
        """Deterministic key: parameters sorted by name."""
        parts = ":".join(f"{k}={params[k]!r}" for k in sorted(params))
        return f"{self.prefix}:{namespace}:{parts}"

    async def get(self, key: str) -> Optional[str]:
        try:
            return await self.redis.get(key)
        except RedisError:
            logger.warning("Cache read failed for %s", key, exc_info=True)
            return None

    async def set(self, key: str, value: str, ttl: CacheStrategy) -> None:
        try:
            await self.redis.set(key, value, ex=int(ttl))
        except RedisError:
            logger.warning("Cache write failed for %s", key, exc_info=True)

    async def get_or_set(
        self,
        key: str,
        ttl: CacheStrategy,
        produce: Callable[[], Awaitable[str]],
    ) -> str:
        """Return the cached value for *key*, producing and storing it on miss."""
        cached = await self.get(key)
        if cached is not None:
            return cached
        value = await produce()
        await self.set(key, value, ttl)
        return value

    async def close(self) -> None:
        await self.redis.aclose()

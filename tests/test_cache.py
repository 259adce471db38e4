"""
Response cache tests (mocked Redis).

Covers key construction, hit / miss behaviour and degradation to uncached
reads when Redis is unavailable.
"""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from ga_eats.api.caching import cached_response
from ga_eats.api.schemas import HealthResponse
from ga_eats.infrastructure.cache import CacheStrategy, QueryCache


class TestMakeKey:
    def test_parameters_sorted_by_name(self):
        cache = QueryCache(AsyncMock())
        a = cache.make_key("restaurants:nearby", lng=-122.4, lat=37.6, limit=20)
        b = cache.make_key("restaurants:nearby", limit=20, lat=37.6, lng=-122.4)
        assert a == b
        assert a == "gaeats:restaurants:nearby:lat=37.6:limit=20:lng=-122.4"

    def test_namespaces_do_not_collide(self):
        cache = QueryCache(AsyncMock())
        assert cache.make_key("airports:nearby", lat=1.0) != cache.make_key(
            "restaurants:nearby", lat=1.0
        )


class TestGetOrSet:
    @pytest.mark.asyncio
    async def test_hit_skips_producer(self):
        mock_redis = AsyncMock()
        mock_redis.get = AsyncMock(return_value='{"cached": true}')
        produce = AsyncMock(return_value="fresh")

        cache = QueryCache(mock_redis)
        assert await cache.get_or_set("k", CacheStrategy.MEDIUM, produce) == (
            '{"cached": true}'
        )
        produce.assert_not_awaited()
        mock_redis.set.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_miss_produces_and_stores_with_ttl(self):
        mock_redis = AsyncMock()
        mock_redis.get = AsyncMock(return_value=None)
        produce = AsyncMock(return_value="fresh")

        cache = QueryCache(mock_redis)
        assert await cache.get_or_set("k", CacheStrategy.MEDIUM, produce) == "fresh"
        mock_redis.set.assert_awaited_once_with("k", "fresh", ex=300)

    @pytest.mark.asyncio
    async def test_redis_outage_falls_through(self):
        mock_redis = AsyncMock()
        mock_redis.get = AsyncMock(side_effect=RedisConnectionError("down"))
        mock_redis.set = AsyncMock(side_effect=RedisConnectionError("down"))
        produce = AsyncMock(return_value="fresh")

        cache = QueryCache(mock_redis)
        assert await cache.get_or_set("k", CacheStrategy.LONG, produce) == "fresh"
        produce.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_close(self):
        mock_redis = AsyncMock()
        await QueryCache(mock_redis).close()
        mock_redis.aclose.assert_awaited_once()


class TestCachedResponse:
    @pytest.mark.asyncio
    async def test_disabled_cache_builds_directly(self):
        build = AsyncMock(return_value=HealthResponse())
        result = await cached_response(
            None, "health", {}, CacheStrategy.SHORT, HealthResponse, build
        )
        assert result == HealthResponse()
        build.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_cached_json_is_revalidated(self):
        mock_redis = AsyncMock()
        mock_redis.get = AsyncMock(return_value='{"status": "cached"}')
        build = AsyncMock()

        result = await cached_response(
            QueryCache(mock_redis),
            "health",
            {},
            CacheStrategy.SHORT,
            HealthResponse,
            build,
        )
        assert result.status == "cached"
        build.assert_not_awaited()

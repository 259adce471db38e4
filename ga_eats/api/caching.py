"""Glue between route handlers and the optional Redis response cache."""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Optional, TypeVar

from pydantic import BaseModel

from ga_eats.infrastructure.cache import CacheStrategy, QueryCache

M = TypeVar("M", bound=BaseModel)


async def cached_response(
    cache: Optional[QueryCache],
    namespace: str,
    params: dict[str, Any],
    ttl: CacheStrategy,
    schema: type[M],
    build: Callable[[], Awaitable[M]],
) -> M:
    """Serve *schema* from cache when enabled, else build it directly."""
    if cache is None:
        return await build()

    async def produce() -> str:
        return (await build()).model_dump_json(by_alias=True)

    key = cache.make_key(namespace, **params)
    return schema.model_validate_json(await cache.get_or_set(key, ttl, produce))

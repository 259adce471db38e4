"""FastAPI dependency injection helpers."""

from typing import AsyncIterator, Optional

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from ga_eats.infrastructure.cache import QueryCache
from ga_eats.infrastructure.repositories import AirportRepository
from ga_eats.infrastructure.spatial import build_candidates
from ga_eats.services.proximity import ProximityService


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    """Yield a request-scoped session from the app's session factory."""
    async with request.app.state.session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def get_proximity_service(
    request: Request,
    db: AsyncSession = Depends(get_db),
) -> ProximityService:
    candidates = build_candidates(db, request.app.state.spatial_index)
    return ProximityService(candidates, AirportRepository(db))


def get_cache(request: Request) -> Optional[QueryCache]:
    """The response cache, or ``None`` when caching is disabled."""
    return getattr(request.app.state, "cache", None)

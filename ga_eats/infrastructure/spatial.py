"""
Nearby-candidates strategies  (Strategy Pattern)
================================================

Two interchangeable ways of answering a ``ProximityQuery``:

* ``SpatialIndexCandidates`` -- PostGIS.  ``ST_DWithin`` on the geography
  column uses the GIST index to prefilter; the exact radius predicate,
  ordering and limit are evaluated by the store with a SQL haversine
  expression over the float columns.
* ``FullScanCandidates``     -- any SQL store.  Reads every row of the kind
  that passes the attribute filters, then ranks in Python with the
  Distance Engine.

Both use the haversine sphere of ``EARTH_RADIUS_KM`` so a query returns the
same ordered results whichever path serves it.  The strategy is chosen by
capability detection (``detect_spatial_index``), not by platform name.

Complexity
----------
* Index path:  O(log N + k log k), k = rows inside the prefilter disc
* Full scan:   O(N log N)
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from geoalchemy2 import Geography
from sqlalchemy import cast, func, select, text
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncSession
from sqlalchemy.sql import ColumnElement, Select

from .models import AirportModel, RestaurantModel
from .repositories import airport_from_row, data_access, restaurant_from_row
from ga_eats.domain.distance import EARTH_RADIUS_M
from ga_eats.domain.entities import GeoPoint, NearbyResult
from ga_eats.domain.enums import EntityKind, SpatialBackend
from ga_eats.domain.proximity import ProximityQuery, rank_candidates

logger = logging.getLogger(__name__)

# PostGIS' sphere is a few meters larger than ours; widen the index
# prefilter so it never drops a row the exact predicate would keep.
PREFILTER_SLACK = 1.001

ENTITY_MODELS = {
    EntityKind.RESTAURANT: RestaurantModel,
    EntityKind.AIRPORT: AirportModel,
}

_ROW_MAPPERS = {
    EntityKind.RESTAURANT: restaurant_from_row,
    EntityKind.AIRPORT: airport_from_row,
}


def haversine_sql(latitude_col, longitude_col, center: GeoPoint) -> ColumnElement:
    """SQL expression for the haversine distance in meters to *center*."""
    dlat = func.radians(latitude_col - center.latitude)
    dlng = func.radians(longitude_col - center.longitude)
    h = (
        func.power(func.sin(dlat / 2), 2)
        + func.cos(func.radians(center.latitude))
        * func.cos(func.radians(latitude_col))
        * func.power(func.sin(dlng / 2), 2)
    )
    # rounding can push h just past 1 for antipodal points
    h = func.least(h, 1.0)
    return EARTH_RADIUS_M * 2 * func.atan2(func.sqrt(h), func.sqrt(1 - h))


def _apply_filters(stmt: Select, model, query: ProximityQuery) -> Select:
    if query.filters.is_empty():
        return stmt
    return stmt.where(model.rating >= query.filters.min_rating)


# ── Strategy hierarchy ────────────────────────────────────────────────


class NearbyCandidates(ABC):
    def __init__(self, session: AsyncSession, models: dict | None = None):
        self.session = session
        self.models = models or ENTITY_MODELS

    @abstractmethod
    async def find(self, query: ProximityQuery) -> list[NearbyResult]: ...


class SpatialIndexCandidates(NearbyCandidates):
    """Delegates filtering, ordering and truncation to PostGIS."""

    def build_statement(self, query: ProximityQuery) -> Select:
        model = self.models[query.kind]
        center = query.center
        distance = haversine_sql(model.latitude, model.longitude, center).label(
            "distance"
        )
        center_geog = cast(
            func.ST_SetSRID(
                func.ST_MakePoint(center.longitude, center.latitude), 4326
            ),
            Geography("POINT", srid=4326),
        )
        stmt = (
            select(model, distance)
            .where(
                func.ST_DWithin(
                    model.location,
                    center_geog,
                    query.radius_meters * PREFILTER_SLACK,
                    False,
                )
            )
            .where(distance <= query.radius_meters)
            .order_by(distance, model.id)
            .limit(query.limit)
        )
        return _apply_filters(stmt, model, query)

    async def find(self, query: ProximityQuery) -> list[NearbyResult]:
        to_entity = _ROW_MAPPERS[query.kind]
        with data_access(f"{query.kind.value.lower()} proximity query"):
            result = await self.session.execute(self.build_statement(query))
            rows = result.all()
        return [
            NearbyResult(entity=to_entity(row[0]), distance=float(row.distance))
            for row in rows
        ]


class FullScanCandidates(NearbyCandidates):
    """Reads all filtered rows and ranks them with the Distance Engine."""

    def build_statement(self, query: ProximityQuery) -> Select:
        model = self.models[query.kind]
        stmt = select(model).order_by(model.id)
        return _apply_filters(stmt, model, query)

    async def find(self, query: ProximityQuery) -> list[NearbyResult]:
        to_entity = _ROW_MAPPERS[query.kind]
        with data_access(f"{query.kind.value.lower()} full scan"):
            result = await self.session.execute(self.build_statement(query))
            rows = result.scalars().all()
        return rank_candidates(
            (to_entity(row) for row in rows),
            query.center,
            query.radius_meters,
            query.limit,
        )


# ── Capability detection ──────────────────────────────────────────────


async def detect_spatial_index(conn: AsyncConnection) -> bool:
    """True when the store is PostgreSQL with the PostGIS extension."""
    if conn.dialect.name != "postgresql":
        return False
    with data_access("PostGIS detection"):
        result = await conn.execute(
            text("SELECT 1 FROM pg_extension WHERE extname = 'postgis'")
        )
        return result.scalar() is not None


async def resolve_spatial_backend(conn: AsyncConnection, backend: str) -> bool:
    """
    Decide once per application lifetime whether the index path is used.

    ``postgis`` and ``scan`` force the choice; ``auto`` detects.
    """
    mode = SpatialBackend(backend)
    if mode is SpatialBackend.POSTGIS:
        return True
    if mode is SpatialBackend.SCAN:
        return False
    available = await detect_spatial_index(conn)
    if not available:
        logger.warning(
            "No PostGIS spatial index available -- falling back to full scans"
        )
    return available


def build_candidates(
    session: AsyncSession, spatial_index: bool, models: dict | None = None
) -> NearbyCandidates:
    if spatial_index:
        return SpatialIndexCandidates(session, models)
    return FullScanCandidates(session, models)

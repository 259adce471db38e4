"""
Proximity Query Service
=======================

Stateless facade over a ``NearbyCandidates`` strategy and the airport
repository.  Every call is an independent read: validate, resolve, return
a distance-annotated list (possibly empty, never ``None``).

Errors
------
* ``InvalidArgument``   -- radius or limit not positive, unsupported filter.
* ``NotFound``          -- unknown airport code in a named-location query.
* ``DataAccessFailure`` -- propagated unchanged from the persistence layer.
"""

from __future__ import annotations

from typing import Optional

from ga_eats.domain.entities import (
    Airport,
    GeoPoint,
    NamedLocationResult,
    NearbyFilters,
    NearbyResult,
    Restaurant,
)
from ga_eats.domain.enums import EntityKind
from ga_eats.domain.errors import NotFound
from ga_eats.domain.proximity import ProximityQuery, check_bounds
from ga_eats.infrastructure.repositories import AirportRepository
from ga_eats.infrastructure.spatial import NearbyCandidates

NEAREST_AIRPORT_RADIUS_KM = 500.0
DEFAULT_LIMIT = 20


class ProximityService:
    def __init__(self, candidates: NearbyCandidates, airports: AirportRepository):
        self.candidates = candidates
        self.airports = airports

    async def find_nearby(
        self,
        kind: EntityKind,
        center: GeoPoint,
        radius_km: float,
        filters: Optional[NearbyFilters] = None,
        limit: int = DEFAULT_LIMIT,
    ) -> list[NearbyResult]:
        """All *kind* entities within *radius_km* of *center*, nearest first."""
        query = ProximityQuery(
            kind=kind,
            center=center,
            radius_km=radius_km,
            limit=limit,
            filters=filters or NearbyFilters(),
        )
        return await self.candidates.find(query)

    async def find_restaurants_nearby(
        self,
        center: GeoPoint,
        radius_km: float = 5.0,
        min_rating: float = 4.0,
        limit: int = DEFAULT_LIMIT,
    ) -> list[NearbyResult[Restaurant]]:
        return await self.find_nearby(
            EntityKind.RESTAURANT,
            center,
            radius_km,
            NearbyFilters(min_rating=min_rating),
            limit,
        )

    async def find_airports_nearby(
        self,
        center: GeoPoint,
        radius_km: float = 50.0,
        limit: int = DEFAULT_LIMIT,
    ) -> list[NearbyResult[Airport]]:
        return await self.find_nearby(
            EntityKind.AIRPORT, center, radius_km, None, limit
        )

    async def find_nearest_airport(
        self, point: GeoPoint
    ) -> Optional[NearbyResult[Airport]]:
        """Nearest airport within 500 km, or ``None`` if there is none."""
        results = await self.find_nearby(
            EntityKind.AIRPORT, point, NEAREST_AIRPORT_RADIUS_KM, None, 1
        )
        return results[0] if results else None

    async def find_entities_near_named_location(
        self,
        kind: EntityKind,
        location_code: str,
        radius_km: float,
        filters: Optional[NearbyFilters] = None,
        limit: int = DEFAULT_LIMIT,
    ) -> NamedLocationResult:
        """
        Resolve *location_code* to an airport (case-insensitive), then search
        around it.  Raises ``NotFound`` for an unknown code; a known code with
        nothing nearby yields an empty ``results`` list.
        """
        check_bounds(radius_km, limit)
        airport = await self.airports.get_by_code(location_code)
        if airport is None:
            raise NotFound(f"Airport not found: {location_code}")
        results = await self.find_nearby(
            kind, airport.location, radius_km, filters, limit
        )
        return NamedLocationResult(location=airport, results=results)

    async def find_restaurants_near_airport(
        self,
        airport_code: str,
        radius_km: float = 5.0,
        min_rating: float = 4.0,
        limit: int = DEFAULT_LIMIT,
    ) -> NamedLocationResult:
        return await self.find_entities_near_named_location(
            EntityKind.RESTAURANT,
            airport_code,
            radius_km,
            NearbyFilters(min_rating=min_rating),
            limit,
        )

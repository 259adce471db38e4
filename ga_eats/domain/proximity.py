"""
Proximity query contract
========================

A ``ProximityQuery`` is built per request and discarded afterwards::

    { kind, center, radius_km > 0, limit > 0, filters }

Result invariants (hold for every candidates strategy)
------------------------------------------------------
* every result's distance is ``<= radius_km * 1000`` meters;
* results are non-decreasing by distance, equal distances ordered by id;
* ``len(results) <= limit``.

``rank_candidates`` is the in-memory half of the full-scan path: it applies
the Distance Engine to each candidate and enforces the invariants above.

Complexity: O(n log n) for n candidates.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from .distance import haversine_m
from .entities import E, GeoPoint, NearbyFilters, NearbyResult
from .enums import SUPPORTED_FILTERS, EntityKind
from .errors import InvalidArgument


def check_bounds(radius_km: float, limit: int) -> None:
    if not radius_km > 0:
        raise InvalidArgument(f"radius_km must be > 0, got {radius_km}")
    if limit <= 0:
        raise InvalidArgument(f"limit must be > 0, got {limit}")


@dataclass(frozen=True)
class ProximityQuery:
    kind: EntityKind
    center: GeoPoint
    radius_km: float
    limit: int
    filters: NearbyFilters = field(default_factory=NearbyFilters)

    def __post_init__(self) -> None:
        check_bounds(self.radius_km, self.limit)
        allowed = SUPPORTED_FILTERS[self.kind]
        if self.filters.min_rating is not None and "min_rating" not in allowed:
            raise InvalidArgument(
                f"min_rating filter is not supported for {self.kind.value}"
            )

    @property
    def radius_meters(self) -> float:
        return self.radius_km * 1000


def rank_candidates(
    candidates: Iterable[E], center: GeoPoint, radius_meters: float, limit: int
) -> list[NearbyResult[E]]:
    """
    Annotate *candidates* with their distance from *center*, drop those
    outside *radius_meters*, sort ascending and keep the first *limit*.

    Ties are broken by entity id so the order is independent of the order
    the candidates were read in.
    """
    within = []
    for entity in candidates:
        distance = haversine_m(center, entity.location)
        if distance <= radius_meters:
            within.append(NearbyResult(entity=entity, distance=distance))
    within.sort(key=lambda r: (r.distance, r.entity.id))
    return within[:limit]

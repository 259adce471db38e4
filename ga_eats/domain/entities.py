"""
Domain entities and value objects.

Entities are read-only from the proximity core's point of view: they are
created at ingestion time and never mutated by a query.  ``NearbyResult``
wraps an entity with a distance that only means something relative to the
query that produced it.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Generic, Optional, TypeVar

from .formatting import format_distance


# ── Value Objects ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class GeoPoint:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class NearbyFilters:
    min_rating: Optional[float] = None

    def is_empty(self) -> bool:
        return self.min_rating is None


# ── Entities ──────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Restaurant:
    id: int
    name: str
    rating: float
    address: str
    city: str
    country: str
    location: GeoPoint
    cuisine: Optional[str] = None
    description: Optional[str] = None
    state: Optional[str] = None
    google_place_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class Airport:
    id: int
    code: str
    name: str
    city: str
    country: str
    location: GeoPoint
    state: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


E = TypeVar("E", Restaurant, Airport)


@dataclass(frozen=True)
class NearbyResult(Generic[E]):
    """An entity annotated with its distance (meters) from a query center."""

    entity: E
    distance: float

    @property
    def formatted_distance(self) -> str:
        return format_distance(self.distance)


@dataclass(frozen=True)
class NamedLocationResult:
    """Resolved airport plus the entities found around it."""

    location: Airport
    results: list[NearbyResult]

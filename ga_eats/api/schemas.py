"""Pydantic response schemas for the REST API (camelCase on the wire)."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ga_eats.domain.entities import Airport, NearbyResult, Restaurant


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ── Records ───────────────────────────────────────────────────────────


class AirportOut(CamelModel):
    id: int
    code: str
    name: str
    city: str
    state: Optional[str] = None
    country: str
    latitude: float
    longitude: float
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, airport: Airport) -> "AirportOut":
        return cls(
            id=airport.id,
            code=airport.code,
            name=airport.name,
            city=airport.city,
            state=airport.state,
            country=airport.country,
            latitude=airport.location.latitude,
            longitude=airport.location.longitude,
            created_at=airport.created_at,
            updated_at=airport.updated_at,
        )


class NearbyAirportOut(AirportOut):
    distance: float  # meters
    formatted_distance: str

    @classmethod
    def from_result(cls, result: NearbyResult[Airport]) -> "NearbyAirportOut":
        base = AirportOut.from_entity(result.entity)
        return cls(
            **base.model_dump(),
            distance=result.distance,
            formatted_distance=result.formatted_distance,
        )


class NearbyRestaurantOut(CamelModel):
    id: int
    google_place_id: Optional[str] = None
    name: str
    description: Optional[str] = None
    cuisine: Optional[str] = None
    rating: float
    address: str
    city: str
    state: Optional[str] = None
    country: str
    latitude: float
    longitude: float
    distance: float  # meters
    formatted_distance: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_result(
        cls, result: NearbyResult[Restaurant]
    ) -> "NearbyRestaurantOut":
        r = result.entity
        return cls(
            id=r.id,
            google_place_id=r.google_place_id,
            name=r.name,
            description=r.description,
            cuisine=r.cuisine,
            rating=r.rating,
            address=r.address,
            city=r.city,
            state=r.state,
            country=r.country,
            latitude=r.location.latitude,
            longitude=r.location.longitude,
            distance=result.distance,
            formatted_distance=result.formatted_distance,
            created_at=r.created_at,
            updated_at=r.updated_at,
        )


# ── Search echoes ─────────────────────────────────────────────────────


class PointSearch(CamelModel):
    latitude: float
    longitude: float


class AreaSearch(PointSearch):
    radius_km: float
    limit: int


class RestaurantSearch(AreaSearch):
    min_rating: float


class AirportDetailSearch(CamelModel):
    radius_km: float
    min_rating: float


# ── Responses ─────────────────────────────────────────────────────────


class RestaurantsNearbyResponse(CamelModel):
    restaurants: list[NearbyRestaurantOut]
    search: RestaurantSearch
    count: int


class AirportsNearbyResponse(CamelModel):
    airports: list[NearbyAirportOut]
    search: AreaSearch
    count: int


class NearestAirportResponse(CamelModel):
    airport: Optional[NearbyAirportOut] = None
    search: PointSearch


class AirportDetailResponse(CamelModel):
    airport: AirportOut
    restaurants: list[NearbyRestaurantOut]
    search: AirportDetailSearch
    count: int


class HealthResponse(BaseModel):
    status: str = "ok"


class ErrorResponse(BaseModel):
    error: str
    message: str

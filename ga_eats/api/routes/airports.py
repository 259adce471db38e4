"""
Airport endpoints
=================

GET /api/v1/airports/nearby  -- airports around a point
GET /api/v1/airports/nearest -- single nearest airport within 500 km
GET /api/v1/airports/{code}  -- airport details plus nearby restaurants
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Path, Query, Request

from ga_eats.api.caching import cached_response
from ga_eats.api.dependencies import get_cache, get_proximity_service
from ga_eats.api.middleware import limiter
from ga_eats.api.schemas import (
    AirportDetailResponse,
    AirportDetailSearch,
    AirportOut,
    AirportsNearbyResponse,
    AreaSearch,
    ErrorResponse,
    NearbyAirportOut,
    NearbyRestaurantOut,
    NearestAirportResponse,
    PointSearch,
)
from ga_eats.config import settings
from ga_eats.domain.entities import GeoPoint
from ga_eats.infrastructure.cache import CacheStrategy, QueryCache
from ga_eats.services.proximity import ProximityService

router = APIRouter(prefix="/airports", tags=["airports"])


@router.get(
    "/nearby",
    response_model=AirportsNearbyResponse,
    summary="Find airports near a point",
)
@limiter.limit(settings.rate_limit)
async def airports_nearby(
    request: Request,
    lat: float = Query(..., ge=-90, le=90),
    lng: float = Query(..., ge=-180, le=180),
    distance: float = Query(
        settings.airport_radius_km,
        gt=0,
        le=settings.airport_max_radius_km,
        description="Search radius in kilometers",
    ),
    limit: int = Query(settings.default_limit, ge=1, le=settings.max_limit),
    service: ProximityService = Depends(get_proximity_service),
    cache: Optional[QueryCache] = Depends(get_cache),
):
    async def build() -> AirportsNearbyResponse:
        results = await service.find_airports_nearby(
            GeoPoint(lat, lng), distance, limit
        )
        return AirportsNearbyResponse(
            airports=[NearbyAirportOut.from_result(r) for r in results],
            search=AreaSearch(
                latitude=lat, longitude=lng, radius_km=distance, limit=limit
            ),
            count=len(results),
        )

    return await cached_response(
        cache,
        "airports:nearby",
        {"lat": lat, "lng": lng, "distance": distance, "limit": limit},
        CacheStrategy.LONG,
        AirportsNearbyResponse,
        build,
    )


@router.get(
    "/nearest",
    response_model=NearestAirportResponse,
    summary="Find the nearest airport within 500 km",
    description="`airport` is null when no airport lies within 500 km.",
)
@limiter.limit(settings.rate_limit)
async def nearest_airport(
    request: Request,
    lat: float = Query(..., ge=-90, le=90),
    lng: float = Query(..., ge=-180, le=180),
    service: ProximityService = Depends(get_proximity_service),
):
    nearest = await service.find_nearest_airport(GeoPoint(lat, lng))
    return NearestAirportResponse(
        airport=NearbyAirportOut.from_result(nearest) if nearest else None,
        search=PointSearch(latitude=lat, longitude=lng),
    )


@router.get(
    "/{code}",
    response_model=AirportDetailResponse,
    summary="Airport details with nearby restaurants",
    responses={404: {"model": ErrorResponse, "description": "Unknown code"}},
)
@limiter.limit(settings.rate_limit)
async def airport_detail(
    request: Request,
    code: str = Path(..., min_length=1, max_length=10, pattern=r"^\S+$"),
    distance: float = Query(
        settings.restaurant_radius_km,
        gt=0,
        le=settings.airport_detail_max_radius_km,
        description="Search radius in kilometers",
    ),
    min_rating: float = Query(
        settings.default_min_rating, alias="minRating", ge=0, le=5
    ),
    service: ProximityService = Depends(get_proximity_service),
    cache: Optional[QueryCache] = Depends(get_cache),
):
    async def build() -> AirportDetailResponse:
        found = await service.find_restaurants_near_airport(
            code, distance, min_rating
        )
        return AirportDetailResponse(
            airport=AirportOut.from_entity(found.location),
            restaurants=[NearbyRestaurantOut.from_result(r) for r in found.results],
            search=AirportDetailSearch(radius_km=distance, min_rating=min_rating),
            count=len(found.results),
        )

    return await cached_response(
        cache,
        "airports:detail",
        {"code": code.upper(), "distance": distance, "min_rating": min_rating},
        CacheStrategy.MEDIUM,
        AirportDetailResponse,
        build,
    )

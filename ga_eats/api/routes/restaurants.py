"""
Restaurant endpoints
====================

GET /api/v1/restaurants/nearby -- rated restaurants around a point
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from ga_eats.api.caching import cached_response
from ga_eats.api.dependencies import get_cache, get_proximity_service
from ga_eats.api.middleware import limiter
from ga_eats.api.schemas import (
    NearbyRestaurantOut,
    RestaurantSearch,
    RestaurantsNearbyResponse,
)
from ga_eats.config import settings
from ga_eats.domain.entities import GeoPoint
from ga_eats.infrastructure.cache import CacheStrategy, QueryCache
from ga_eats.services.proximity import ProximityService

router = APIRouter(prefix="/restaurants", tags=["restaurants"])


@router.get(
    "/nearby",
    response_model=RestaurantsNearbyResponse,
    summary="Find restaurants near a point",
    description=(
        "Restaurants within `distance` km of (`lat`, `lng`) rated at least "
        "`minRating`, nearest first."
    ),
)
@limiter.limit(settings.rate_limit)
async def restaurants_nearby(
    request: Request,
    lat: float = Query(..., ge=-90, le=90),
    lng: float = Query(..., ge=-180, le=180),
    distance: float = Query(
        settings.restaurant_radius_km,
        gt=0,
        le=settings.restaurant_max_radius_km,
        description="Search radius in kilometers",
    ),
    min_rating: float = Query(
        settings.default_min_rating, alias="minRating", ge=0, le=5
    ),
    limit: int = Query(settings.default_limit, ge=1, le=settings.max_limit),
    service: ProximityService = Depends(get_proximity_service),
    cache: Optional[QueryCache] = Depends(get_cache),
):
    async def build() -> RestaurantsNearbyResponse:
        results = await service.find_restaurants_nearby(
            GeoPoint(lat, lng), distance, min_rating, limit
        )
        return RestaurantsNearbyResponse(
            restaurants=[NearbyRestaurantOut.from_result(r) for r in results],
            search=RestaurantSearch(
                latitude=lat,
                longitude=lng,
                radius_km=distance,
                min_rating=min_rating,
                limit=limit,
            ),
            count=len(results),
        )

    return await cached_response(
        cache,
        "restaurants:nearby",
        {
            "lat": lat,
            "lng": lng,
            "distance": distance,
            "min_rating": min_rating,
            "limit": limit,
        },
        CacheStrategy.MEDIUM,
        RestaurantsNearbyResponse,
        build,
    )

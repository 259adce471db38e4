"""
Repository Pattern -- abstracts DB access so domain logic stays DB-agnostic.

Each repository receives an ``AsyncSession`` (unit-of-work) and exposes
domain-relevant queries only.  Rows are mapped to frozen domain entities
on the way out; driver errors are re-raised as ``DataAccessFailure``.

The mapped model class is injectable so the same queries run against the
SQLite test models, which stub out the PostGIS column.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional

from geoalchemy2 import WKTElement
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from .models import AirportModel, RestaurantModel
from ga_eats.domain.entities import Airport, GeoPoint, Restaurant
from ga_eats.domain.errors import DataAccessFailure


@contextmanager
def data_access(operation: str) -> Iterator[None]:
    """Translate SQLAlchemy errors raised inside the block."""
    try:
        yield
    except SQLAlchemyError as exc:
        raise DataAccessFailure(f"{operation} failed: {exc}") from exc


def make_point(latitude: float, longitude: float) -> WKTElement:
    # WKT is (longitude latitude)
    return WKTElement(f"POINT({longitude} {latitude})", srid=4326)


def airport_from_row(row) -> Airport:
    return Airport(
        id=row.id,
        code=row.code,
        name=row.name,
        city=row.city,
        state=row.state,
        country=row.country,
        location=GeoPoint(row.latitude, row.longitude),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def restaurant_from_row(row) -> Restaurant:
    return Restaurant(
        id=row.id,
        name=row.name,
        rating=row.rating,
        address=row.address,
        city=row.city,
        state=row.state,
        country=row.country,
        cuisine=row.cuisine,
        description=row.description,
        google_place_id=row.google_place_id,
        location=GeoPoint(row.latitude, row.longitude),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class AirportRepository:
    def __init__(self, session: AsyncSession, model=AirportModel):
        self.session = session
        self.model = model

    async def get_by_code(self, code: str) -> Optional[Airport]:
        """Case-insensitive exact match on the IATA/ICAO code."""
        with data_access("airport lookup"):
            result = await self.session.execute(
                select(self.model)
                .where(func.upper(self.model.code) == code.upper())
                .order_by(self.model.id)
                .limit(1)
            )
            row = result.scalar_one_or_none()
        return airport_from_row(row) if row else None

    async def create_airport(
        self,
        *,
        code: str,
        name: str,
        city: str,
        country: str,
        latitude: float,
        longitude: float,
        state: str | None = None,
    ) -> Airport:
        """Create an airport with its PostGIS geography point."""
        row = self.model(
            code=code,
            name=name,
            city=city,
            state=state,
            country=country,
            latitude=latitude,
            longitude=longitude,
            location=make_point(latitude, longitude),
        )
        with data_access("airport insert"):
            self.session.add(row)
            await self.session.flush()
            await self.session.refresh(row)
        return airport_from_row(row)

    async def count(self) -> int:
        with data_access("airport count"):
            result = await self.session.execute(
                select(func.count()).select_from(self.model)
            )
        return result.scalar() or 0


class RestaurantRepository:
    def __init__(self, session: AsyncSession, model=RestaurantModel):
        self.session = session
        self.model = model

    async def create_restaurant(
        self,
        *,
        name: str,
        rating: float,
        address: str,
        city: str,
        country: str,
        latitude: float,
        longitude: float,
        cuisine: str | None = None,
        description: str | None = None,
        state: str | None = None,
        google_place_id: str | None = None,
    ) -> Restaurant:
        """Create a restaurant with its PostGIS geography point."""
        row = self.model(
            google_place_id=google_place_id,
            name=name,
            description=description,
            cuisine=cuisine,
            rating=rating,
            address=address,
            city=city,
            state=state,
            country=country,
            latitude=latitude,
            longitude=longitude,
            location=make_point(latitude, longitude),
        )
        with data_access("restaurant insert"):
            self.session.add(row)
            await self.session.flush()
            await self.session.refresh(row)
        return restaurant_from_row(row)

    async def count(self) -> int:
        with data_access("restaurant count"):
            result = await self.session.execute(
                select(func.count()).select_from(self.model)
            )
        return result.scalar() or 0

"""
SQLAlchemy ORM models  (maps to PostgreSQL + PostGIS).

Tables
------
* ``airports``     -- public-use airports, addressed by IATA/ICAO code
* ``restaurants``  -- rated restaurants near airports

Every row carries exactly one location, written twice: as a PostGIS
``geography(POINT, 4326)`` for index-accelerated radius filtering and as
plain ``latitude`` / ``longitude`` floats for distance arithmetic and the
full-scan path.

Indexes
-------
* **GIST** on ``location`` for ``ST_DWithin`` radius queries.
* **Unique** on ``airports.code`` and ``restaurants.google_place_id``.
* **B-Tree** on ``restaurants.rating`` for the rating filter.
"""

from sqlalchemy import Column, DateTime, Float, Index, Integer, String, Text, func
from geoalchemy2 import Geography

from .database import Base


class AirportModel(Base):
    __tablename__ = "airports"

    id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(String(10), unique=True, nullable=False)
    name = Column(String(255), nullable=False)
    city = Column(String(100), nullable=False)
    state = Column(String(10), nullable=True)
    country = Column(String(10), nullable=False, default="US")

    location = Column(
        Geography("POINT", srid=4326, spatial_index=False), nullable=False
    )
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    __table_args__ = (
        Index("idx_airports_location", "location", postgresql_using="gist"),
    )


class RestaurantModel(Base):
    __tablename__ = "restaurants"

    id = Column(Integer, primary_key=True, autoincrement=True)
    google_place_id = Column(String(255), unique=True, nullable=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    cuisine = Column(String(100), nullable=True)
    rating = Column(Float, nullable=False, default=0.0)
    address = Column(String(500), nullable=False)
    city = Column(String(100), nullable=False)
    state = Column(String(10), nullable=True)
    country = Column(String(10), nullable=False, default="US")

    location = Column(
        Geography("POINT", srid=4326, spatial_index=False), nullable=False
    )
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    __table_args__ = (
        Index("idx_restaurants_location", "location", postgresql_using="gist"),
        Index("idx_restaurants_rating", "rating"),
    )

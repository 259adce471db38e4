"""
Test models and sample data.

SQLite has no PostGIS, so the test models mirror the production ones with
the ``geography`` column replaced by a plain String (WKT) column.  The
``latitude`` / ``longitude`` float columns, which the full-scan path reads,
are identical.
"""

from sqlalchemy import Column, DateTime, Float, Integer, String, Text, func
from sqlalchemy.orm import DeclarativeBase

from ga_eats.domain.enums import EntityKind


class StubBase(DeclarativeBase):
    pass


class StubAirportModel(StubBase):
    __tablename__ = "airports"
    id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(String(10), unique=True, nullable=False)
    name = Column(String(255), nullable=False)
    city = Column(String(100), nullable=False)
    state = Column(String(10), nullable=True)
    country = Column(String(10), nullable=False, default="US")
    location = Column(String, nullable=True)  # stub for Geography
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now())


class StubRestaurantModel(StubBase):
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
    location = Column(String, nullable=True)  # stub for Geography
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now())


TEST_MODELS = {
    EntityKind.RESTAURANT: StubRestaurantModel,
    EntityKind.AIRPORT: StubAirportModel,
}


# ── Sample data ───────────────────────────────────────────────────────

SFO = (37.6213, -122.3790)

AIRPORTS = [
    ("KSFO", "San Francisco International Airport", "San Francisco", 37.6213, -122.3790),
    ("KOAK", "Oakland International Airport", "Oakland", 37.7126, -122.2197),
    ("KLAX", "Los Angeles International Airport", "Los Angeles", 33.9416, -118.4085),
    ("KJFK", "John F. Kennedy International Airport", "New York", 40.6413, -73.7781),
]

# Distances from SFO: Flying Burger ~670 m, twins ~967 m, Ramen ~2.6 km,
# Tacos ~3.0 km, Hangar ~3.2 km (rated 3.6), Century Grill ~540 km.
RESTAURANTS = [
    ("Runway Ramen", "Japanese", 4.7, 37.5985, -122.3870),
    ("The Flying Burger", "American", 4.5, 37.6250, -122.3850),
    ("Taxiway Tacos", "Mexican", 4.2, 37.6305, -122.4110),
    ("Hangar Diner", "American", 3.6, 37.6410, -122.4050),
    ("Twin Peaks Pizza", "Italian", 4.0, 37.6300, -122.3790),
    ("Twin Peaks Pasta", "Italian", 4.0, 37.6300, -122.3790),
    ("Century Grill", "Steakhouse", 4.3, 33.9455, -118.3900),
]


def sample_rows():
    rows = []
    for code, name, city, lat, lng in AIRPORTS:
        rows.append(
            StubAirportModel(
                code=code,
                name=name,
                city=city,
                state="NY" if code == "KJFK" else "CA",
                country="US",
                location=f"POINT({lng} {lat})",
                latitude=lat,
                longitude=lng,
            )
        )
    for name, cuisine, rating, lat, lng in RESTAURANTS:
        rows.append(
            StubRestaurantModel(
                name=name,
                cuisine=cuisine,
                rating=rating,
                address=f"1 {name} Way",
                city="San Francisco",
                state="CA",
                country="US",
                location=f"POINT({lng} {lat})",
                latitude=lat,
                longitude=lng,
            )
        )
    return rows

"""
Seed script -- populates the database with sample data for reviewers.

Run after migrations:
    python seed.py

Creates:
  - 6 airports (Bay Area, Los Angeles, New York)
  - 12 restaurants around them, a few below the default 4.0 rating cut-off
"""

import asyncio

from ga_eats.config import settings
from ga_eats.infrastructure.database import create_engine, create_session_factory
from ga_eats.infrastructure.repositories import AirportRepository, RestaurantRepository


AIRPORTS = [
    {"code": "KSFO", "name": "San Francisco International Airport", "city": "San Francisco", "state": "CA", "lat": 37.6213, "lng": -122.3790},
    {"code": "KOAK", "name": "Oakland International Airport", "city": "Oakland", "state": "CA", "lat": 37.7126, "lng": -122.2197},
    {"code": "KSJC", "name": "San Jose International Airport", "city": "San Jose", "state": "CA", "lat": 37.3639, "lng": -121.9289},
    {"code": "KLAX", "name": "Los Angeles International Airport", "city": "Los Angeles", "state": "CA", "lat": 33.9416, "lng": -118.4085},
    {"code": "KJFK", "name": "John F. Kennedy International Airport", "city": "New York", "state": "NY", "lat": 40.6413, "lng": -73.7781},
    {"code": "KLGA", "name": "LaGuardia Airport", "city": "New York", "state": "NY", "lat": 40.7769, "lng": -73.8740},
]

RESTAURANTS = [
    # Around SFO
    {"name": "The Flying Burger", "cuisine": "American", "rating": 4.5, "address": "123 Airport Rd", "city": "San Francisco", "state": "CA", "lat": 37.6250, "lng": -122.3850},
    {"name": "Runway Ramen", "cuisine": "Japanese", "rating": 4.7, "address": "450 Bayshore Blvd", "city": "Millbrae", "state": "CA", "lat": 37.5985, "lng": -122.3870},
    {"name": "Taxiway Tacos", "cuisine": "Mexican", "rating": 4.2, "address": "88 El Camino Real", "city": "San Bruno", "state": "CA", "lat": 37.6305, "lng": -122.4110},
    {"name": "Hangar Diner", "cuisine": "American", "rating": 3.6, "address": "12 Hangar Way", "city": "South San Francisco", "state": "CA", "lat": 37.6410, "lng": -122.4050},
    # Around OAK / SJC
    {"name": "Tower Thai", "cuisine": "Thai", "rating": 4.4, "address": "900 Hegenberger Rd", "city": "Oakland", "state": "CA", "lat": 37.7240, "lng": -122.1970},
    {"name": "Pilot's Pho", "cuisine": "Vietnamese", "rating": 4.6, "address": "1701 Airport Blvd", "city": "San Jose", "state": "CA", "lat": 37.3680, "lng": -121.9200},
    # Around LAX
    {"name": "Century Grill", "cuisine": "Steakhouse", "rating": 4.3, "address": "5985 W Century Blvd", "city": "Los Angeles", "state": "CA", "lat": 33.9455, "lng": -118.3900},
    {"name": "Sepulveda Sushi", "cuisine": "Japanese", "rating": 4.8, "address": "8800 S Sepulveda Blvd", "city": "Los Angeles", "state": "CA", "lat": 33.9560, "lng": -118.3960},
    {"name": "Arrivals Cafe", "cuisine": "Cafe", "rating": 3.9, "address": "200 World Way", "city": "Los Angeles", "state": "CA", "lat": 33.9430, "lng": -118.4050},
    # Around JFK / LGA
    {"name": "Jamaica Bay Seafood", "cuisine": "Seafood", "rating": 4.5, "address": "147-10 Rockaway Blvd", "city": "Queens", "state": "NY", "lat": 40.6650, "lng": -73.7900},
    {"name": "Astoria Souvlaki", "cuisine": "Greek", "rating": 4.7, "address": "31-09 Ditmars Blvd", "city": "Queens", "state": "NY", "lat": 40.7750, "lng": -73.9100},
    {"name": "Terminal B Bagels", "cuisine": "Bakery", "rating": 4.1, "address": "94-00 Ditmars Blvd", "city": "Queens", "state": "NY", "lat": 40.7700, "lng": -73.8720},
]


async def seed(session_factory):
    async with session_factory() as session:
        airports = AirportRepository(session)
        restaurants = RestaurantRepository(session)
        if await airports.count() > 0 or await restaurants.count() > 0:
            print("Database already seeded. Skipping.")
            return

        # ── Airports ──────────────────────────────────────────────────
        for a in AIRPORTS:
            await airports.create_airport(
                code=a["code"],
                name=a["name"],
                city=a["city"],
                state=a["state"],
                country="US",
                latitude=a["lat"],
                longitude=a["lng"],
            )
        print(f"  Created {len(AIRPORTS)} airports")

        # ── Restaurants ───────────────────────────────────────────────
        for r in RESTAURANTS:
            await restaurants.create_restaurant(
                name=r["name"],
                cuisine=r["cuisine"],
                rating=r["rating"],
                address=r["address"],
                city=r["city"],
                state=r["state"],
                country="US",
                latitude=r["lat"],
                longitude=r["lng"],
            )
        print(f"  Created {len(RESTAURANTS)} restaurants")

        await session.commit()
        print("\nSeed complete!")


async def main():
    print("Seeding database...")
    engine = create_engine(settings.database_url)
    await seed(create_session_factory(engine))
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())

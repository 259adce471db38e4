"""
Distance calculation using the Haversine formula.

Assumption
----------
The earth is modelled as a sphere of radius 6 371 km (not the WGS-84
ellipsoid).  Every distance in the system, including the ones computed
inside the database on the index-accelerated path, uses this same model so
that results do not depend on which query path served them.

No input validation happens here: coordinates are range-checked at the
API boundary.

Complexity: O(1) per call.
"""

import math

from .entities import GeoPoint

EARTH_RADIUS_KM = 6_371.0
EARTH_RADIUS_M = EARTH_RADIUS_KM * 1000


def haversine_km(a: GeoPoint, b: GeoPoint) -> float:
    """Return the great-circle distance in **km** between two points."""
    lat1_r, lat2_r = math.radians(a.latitude), math.radians(b.latitude)
    dlat = math.radians(b.latitude - a.latitude)
    dlng = math.radians(b.longitude - a.longitude)

    h = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1_r) * math.cos(lat2_r) * math.sin(dlng / 2) ** 2
    )
    # rounding can push h just past 1 for antipodal points
    h = min(h, 1.0)
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
    return EARTH_RADIUS_KM * c


def haversine_m(a: GeoPoint, b: GeoPoint) -> float:
    """Same as :func:`haversine_km`, in meters."""
    return haversine_km(a, b) * 1000

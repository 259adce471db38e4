"""Domain enumerations."""

import enum


class EntityKind(str, enum.Enum):
    RESTAURANT = "RESTAURANT"
    AIRPORT = "AIRPORT"


# Which filter attributes each entity kind supports
SUPPORTED_FILTERS: dict[EntityKind, set[str]] = {
    EntityKind.RESTAURANT: {"min_rating"},
    EntityKind.AIRPORT: set(),
}


class SpatialBackend(str, enum.Enum):
    AUTO = "auto"
    POSTGIS = "postgis"
    SCAN = "scan"

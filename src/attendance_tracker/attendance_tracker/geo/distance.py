"""Great-circle distance between coordinates (Haversine formula)."""

from __future__ import annotations

import math

from ..core.constants import EARTH_RADIUS_METERS
from .model import Coordinate


def distance_meters(a: Coordinate, b: Coordinate) -> float:
    if a.same_point(b):
        return 0.0

    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    dlat = lat2 - lat1
    dlon = math.radians(b.longitude - a.longitude)

    h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    # Rounding can push h just outside [0, 1] for near-antipodal points.
    h = min(1.0, max(0.0, h))
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
    return EARTH_RADIUS_METERS * c


def distance_km(a: Coordinate, b: Coordinate) -> float:
    return distance_meters(a, b) / 1000.0


def is_within_radius(point: Coordinate, center: Coordinate, radius_meters: float) -> bool:
    """Inclusive boundary: a point exactly on the radius is inside."""
    return distance_meters(point, center) <= radius_meters

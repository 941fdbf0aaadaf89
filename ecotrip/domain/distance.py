"""
Distance calculation using the Haversine formula.

Assumption
----------
Trips are compared on great-circle distance between city centres rather
than on real road / rail / air routes.  Every transport mode therefore
travels the same distance; only the per-km coefficients differ.

Complexity: O(1) per call.
"""

import math

from .entities import GeoPoint

EARTH_RADIUS_KM = 6_371.0


def haversine_km(
    lat1: float, lng1: float, lat2: float, lng2: float
) -> float:
    """Return the great-circle distance in **km** between two points."""
    lat1_r, lat2_r = math.radians(lat1), math.radians(lat2)
    dlat = math.radians(lat2 - lat1)
    dlng = math.radians(lng2 - lng1)

    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1_r) * math.cos(lat2_r) * math.sin(dlng / 2) ** 2
    )
    a = min(1.0, a)  # rounding can push antipodal points just above 1
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def distance_km(origin: GeoPoint, destination: GeoPoint) -> float:
    """Great-circle distance between two :class:`GeoPoint` values.

    No range validation is done here; coordinates come from the city
    directory.
    """
    return haversine_km(
        origin.latitude, origin.longitude,
        destination.latitude, destination.longitude,
    )

"""Great-circle distance between sites."""

from __future__ import annotations

import math

EARTH_RADIUS_KM = 6371.0


def distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Calculate the distance in km between two GPS coordinates.

    Uses the Haversine formula on a sphere of radius ``EARTH_RADIUS_KM``.
    Inputs are not validated: callers check that the coordinates are
    finite, otherwise NaN propagates to the result.
    """
    delta_lat = math.radians(lat2 - lat1)
    delta_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(delta_lat / 2) ** 2
        + math.cos(math.radians(lat1))
        * math.cos(math.radians(lat2))
        * math.sin(delta_lon / 2) ** 2
    )
    return 2 * EARTH_RADIUS_KM * math.atan2(math.sqrt(a), math.sqrt(1 - a))

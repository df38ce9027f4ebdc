"""Great-circle distance on a spherical Earth."""

from __future__ import annotations

import math

from ..models import GeoPoint

EARTH_RADIUS_KM: float = 6371.0


def haversine_km(a: GeoPoint, b: GeoPoint) -> float:
    """Return the haversine distance between *a* and *b* in kilometres."""
    lat1, lon1 = math.radians(a.latitude), math.radians(a.longitude)
    lat2, lon2 = math.radians(b.latitude), math.radians(b.longitude)

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))

    return EARTH_RADIUS_KM * c

__all__ = ["haversine_km", "EARTH_RADIUS_KM"]

"""Great-circle distance helpers."""

import math
from collections.abc import Iterable

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in kilometres between two lat/lon points."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    return 2 * EARTH_RADIUS_KM * math.asin(math.sqrt(a))


def nearest_distance_km(
    lat: float, lon: float, points: Iterable[tuple[float, float]]
) -> float | None:
    """Distance from (lat, lon) to the closest of `points`.

    Returns None when there are no points or the minimum is not finite.
    """
    nearest = min((haversine_km(lat, lon, p_lat, p_lon) for p_lat, p_lon in points), default=None)
    if nearest is None or not math.isfinite(nearest):
        return None
    return nearest

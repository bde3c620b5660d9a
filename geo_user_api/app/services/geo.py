"""
Great-circle distance between two points.

Uses the Haversine formula on a sphere of radius ``EARTH_RADIUS_KM``.
Results are rounded to two decimals, half away from zero, applied to
the shortest decimal representation of the float (so ``0.125`` rounds
to ``0.13``, whereas the builtin ``round`` would give ``0.12``).
"""

import math
from decimal import ROUND_HALF_UP, Decimal


EARTH_RADIUS_KM = 6371.0
DISTANCE_PRECISION = Decimal("0.01")


def round_half_up(value: float, quantum: Decimal = DISTANCE_PRECISION) -> float:
    """Round ``value`` to ``quantum``, ties going away from zero."""
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def distance_km(origin_lat: float, origin_lon: float, dest_lat: float, dest_lon: float) -> float:
    """Distance in kilometers from origin to destination, rounded to 2 decimals.

    All arguments are in degrees.  The function does not validate
    ranges; callers reject out-of-range coordinates beforehand.
    """
    origin_lat_rad = math.radians(origin_lat)
    dest_lat_rad = math.radians(dest_lat)
    dlat = dest_lat_rad - origin_lat_rad
    dlon = math.radians(dest_lon) - math.radians(origin_lon)

    a = math.sin(dlat / 2) ** 2 + math.cos(origin_lat_rad) * math.cos(dest_lat_rad) * math.sin(dlon / 2) ** 2
    # Float drift near antipodal points can push a just outside [0, 1].
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return round_half_up(EARTH_RADIUS_KM * c)


def format_distance(km: float) -> str:
    """Render a distance for API responses, e.g. ``"111.19 km"``."""
    return f"{km} km"

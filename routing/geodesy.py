#Purpose: Small geographic helpers shared by the arc generator, animator and viewport fitter.
#compute_bearing -> initial compass heading from one point toward another
#planar_distance -> straight-line distance in degree space (not geodesic)
#Pure functions, no state, never raise on well-formed (lat, lon) input.

import math
from typing import Tuple

#internal coordinate type :(lat,lon)
LatLon = Tuple[float, float]


def compute_bearing(start: LatLon, end: LatLon) -> float:
    """
    Initial bearing (forward azimuth) from `start` to `end`, in degrees clockwise from north.

    Result is in (-180, 180]. Identical points have no direction, so they
    return 0.0 instead of raising; the same fallback covers any non-finite result
    so NaN never reaches rendering.
    """
    if start == end:
        return 0.0

    lat1, lon1 = (math.radians(value) for value in start)
    lat2, lon2 = (math.radians(value) for value in end)
    d_lon = lon2 - lon1

    y = math.sin(d_lon) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(d_lon)
    bearing = math.degrees(math.atan2(y, x))

    if not math.isfinite(bearing):
        return 0.0
    # atan2 can hand back exactly -180 (y == -0.0); fold it onto +180
    if bearing <= -180.0:
        bearing += 360.0
    return bearing


def planar_distance(a: LatLon, b: LatLon) -> float:
    """Euclidean distance between two points treating degrees as plane coordinates."""
    lat_diff = a[0] - b[0]
    lon_diff = a[1] - b[1]
    return math.sqrt(lat_diff * lat_diff + lon_diff * lon_diff)

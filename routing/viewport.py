"""
Purpose: Fit the map viewport to a route.
What it does:
Computes the bounding box over every curve point plus a max zoom picked from
how far apart the endpoints are, so short hops don't zoom in too far.
Called once per route change, never per animation tick.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from .geodesy import LatLon, planar_distance
from .models import Bounds, FitDirective

DEFAULT_PADDING = (50, 50)

# (upper distance bound in degrees, max zoom); first bound the distance is below wins
ZOOM_STEPS = (
    (10.0, 4),
    (20.0, 5),
    (50.0, 6),
)
FAR_MAX_ZOOM = 7


def max_zoom_for_distance(distance: float) -> int:
    for upper, zoom in ZOOM_STEPS:
        if distance < upper:
            return zoom
    return FAR_MAX_ZOOM


def curve_bounds(curve: Sequence[LatLon]) -> Bounds:
    lats = [point[0] for point in curve]
    lons = [point[1] for point in curve]
    return (min(lats), min(lons)), (max(lats), max(lons))


def compute_fit_directive(
        curve: Sequence[LatLon],
        *,
        padding: Tuple[int, int] = DEFAULT_PADDING,
) -> Optional[FitDirective]:
    """
    Returns None for an empty curve (nothing to fit).
    """
    if not curve:
        return None

    distance = planar_distance(curve[0], curve[-1])
    return FitDirective(
        bounds=curve_bounds(curve),
        padding=tuple(padding),
        max_zoom=max_zoom_for_distance(distance),
    )

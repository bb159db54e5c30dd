"""
Purpose: Curved path generation between two coordinates.
What it does:
Interpolates linearly between the endpoints in plain lat/lon space and lifts
the latitude by a sine hump so the line reads as a flight arc on a flat map.

This is a visual approximation, not a geodesic: it does not follow the
great circle and the hump always bulges toward higher latitude. `segments`
only changes resolution, never the shape.

Known quirk kept for compatibility: when both endpoints are the same point
the hump is still applied, so the middle of the "curve" bulges away from
that point while the first and last entries stay on it.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

from .geodesy import LatLon

Curve = Tuple[LatLon, ...]

DEFAULT_SEGMENTS = 100
PEAK_LIFT = 10.0   # K
LIFT_SCALE = 0.1   # s, so the peak is K * s = 1 degree of latitude


def lift_offset(t, peak_lift: float = PEAK_LIFT, lift_scale: float = LIFT_SCALE):
    """Latitude offset added at parameter t in [0, 1]. Works on scalars and numpy arrays."""
    return np.sin(np.pi * t) * peak_lift * lift_scale


def generate_arc(
        start: LatLon,
        end: LatLon,
        segments: int = DEFAULT_SEGMENTS,
        *,
        peak_lift: float = PEAK_LIFT,
        lift_scale: float = LIFT_SCALE,
) -> Curve:
    """
    Build segments + 1 points from `start` to `end`.

    Args:
        start: (lat, lon) of the departure point
        end: (lat, lon) of the arrival point
        segments: number of steps; values below 1 are treated as 1
        peak_lift, lift_scale: hump height is peak_lift * lift_scale degrees at t = 0.5

    Returns:
        tuple of (lat, lon) floats; first entry equals `start` and last equals `end` exactly.
    """
    segments = max(1, int(segments))

    lat1, lng1 = float(start[0]), float(start[1])
    lat2, lng2 = float(end[0]), float(end[1])

    t = np.arange(segments + 1, dtype=float) / segments
    lats = lat1 + (lat2 - lat1) * t + lift_offset(t, peak_lift, lift_scale)
    lngs = lng1 + (lng2 - lng1) * t

    curve = [(float(lat), float(lng)) for lat, lng in zip(lats, lngs)]

    # sin(pi) is not exactly 0 in floating point; pin the endpoints
    curve[0] = (lat1, lng1)
    curve[-1] = (lat2, lng2)
    return tuple(curve)

"""
Purpose: Data structures produced by the routing layer.
What it does:
- Route (from, to, curve) – ephemeral, rebuilt on every selection
- Selection (origin, destination) – the codes the user picked
- FitDirective (bounds, padding, max_zoom) – what the map viewport should show

Rule: No geometry here. Models only.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Tuple

from catalog.models import Location
from .arc import Curve
from .geodesy import LatLon

Bounds = Tuple[LatLon, LatLon]  # (southwest, northeast)


# eq=False: two routes are the same route only if they are the same object.
# Reselecting a destination builds a new Route and must restart the animation.
@dataclass(frozen=True, eq=False)
class Route:
    from_location: Location
    to_location: Location
    curve: Curve

    @property
    def start(self) -> LatLon:
        return self.curve[0]

    @property
    def end(self) -> LatLon:
        return self.curve[-1]


@dataclass(frozen=True)
class Selection:
    """
    Origin is held fixed by the UI (always the base location) but is kept
    as a field so other origins work the same way.
    """
    origin: str
    destination: str

    def with_destination(self, destination: str) -> Selection:
        return replace(self, destination=destination)


@dataclass(frozen=True)
class FitDirective:
    bounds: Bounds
    padding: Tuple[int, int]
    max_zoom: int

    @property
    def southwest(self) -> LatLon:
        return self.bounds[0]

    @property
    def northeast(self) -> LatLon:
        return self.bounds[1]

#Purpose: Route computation for downstream use.
#Turns a (origin, destination) selection into a Route with its arc curve.
#Consumers: the animator (moves the marker along curve) and the viewport fitter.
#Unknown codes are not errors: the caller gets None and draws nothing.

import logging
from typing import Optional

from catalog.models import Catalog
from .arc import DEFAULT_SEGMENTS, LIFT_SCALE, PEAK_LIFT, generate_arc
from .models import Route, Selection

logger = logging.getLogger(__name__)


def build_route(
        catalog: Catalog,
        origin: str,
        destination: str,
        *,
        segments: int = DEFAULT_SEGMENTS,
        peak_lift: float = PEAK_LIFT,
        lift_scale: float = LIFT_SCALE,
) -> Optional[Route]:
    """
    Build a fresh Route between two catalog codes.

    Returns None when either code is missing from the catalog.
    Every call returns a new Route instance, even for the same pair of codes.
    """
    from_location = catalog.get(origin)
    to_location = catalog.get(destination)

    if from_location is None or to_location is None:
        logger.warning("No route for %s -> %s: unknown location code", origin, destination)
        return None

    curve = generate_arc(
        from_location.coordinates,
        to_location.coordinates,
        segments,
        peak_lift=peak_lift,
        lift_scale=lift_scale,
    )
    logger.debug("Built route %s -> %s with %d points", origin, destination, len(curve))
    return Route(from_location=from_location, to_location=to_location, curve=curve)


def route_for_selection(catalog: Catalog, selection: Selection, **kwargs) -> Optional[Route]:
    """Convenience wrapper taking a Selection instead of two codes."""
    return build_route(catalog, selection.origin, selection.destination, **kwargs)

#Marks routing as a package.
#Re-exports the public route APIs (build_route, generate_arc, compute_bearing,
#compute_fit_directive) so other modules import from routing without knowing internal file names.
#No business logic.

from .geodesy import compute_bearing, planar_distance
from .arc import generate_arc
from .models import Route, Selection, FitDirective
from .route_service import build_route, route_for_selection
from .viewport import compute_fit_directive

__all__ = [
    "compute_bearing",
    "planar_distance",
    "generate_arc",
    "Route",
    "Selection",
    "FitDirective",
    "build_route",
    "route_for_selection",
    "compute_fit_directive",
]

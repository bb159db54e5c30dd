"""
Purpose: The active-route context (the "glue").
What it does:
Receives destination selections from the presentation layer, builds the
Route, emits one FitDirective per route change and (re)starts the single
Animator on the new curve. Tearing the session down cancels the pending tick.

Flow:
    select_destination(code)
        -> build_route(catalog, origin, code)        (None for unknown codes)
        -> compute_fit_directive(route.curve)        (once per route, not per tick)
        -> animator.start(route.curve)               (cancel-then-restart)
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from catalog.models import Catalog
from routing.models import FitDirective, Route, Selection
from routing.route_service import route_for_selection
from routing.viewport import compute_fit_directive
from .animator import Animator, FrameListener
from .models import AnimationState
from .policy import AnimationPolicy, default_animation_policy

logger = logging.getLogger(__name__)

FitListener = Callable[[FitDirective], None]


class RouteSession:
    """
    One origin, one selectable destination, one animator.
    """

    def __init__(
            self,
            catalog: Catalog,
            *,
            origin: Optional[str] = None,
            policy: Optional[AnimationPolicy] = None,
            scheduler: Optional[Any] = None,
            on_frame: Optional[FrameListener] = None,
            on_fit: Optional[FitListener] = None,
    ):
        self.catalog = catalog
        self.policy = policy or default_animation_policy()
        self.on_fit = on_fit

        if origin is None:
            base = catalog.base_location()
            if base is None:
                raise ValueError("Catalog has no base location (price 0); pass origin explicitly.")
            origin = base.code

        self._selection: Optional[Selection] = None
        self._origin = origin
        self._route: Optional[Route] = None
        self._fit: Optional[FitDirective] = None

        self.animator = Animator(
            scheduler,
            tick_seconds=self.policy.tick_seconds,
            on_frame=on_frame,
        )

    # --- Read-only view ---

    @property
    def origin(self) -> str:
        return self._origin

    @property
    def selection(self) -> Optional[Selection]:
        return self._selection

    @property
    def route(self) -> Optional[Route]:
        return self._route

    @property
    def fit_directive(self) -> Optional[FitDirective]:
        return self._fit

    @property
    def state(self) -> Optional[AnimationState]:
        return self.animator.snapshot()

    # --- Selection events ---

    def select_destination(self, destination: str) -> Optional[Route]:
        """
        Handles list clicks, marker clicks and direct input alike.
        Reselecting the current destination restarts the flight from the origin.
        """
        return self._apply(Selection(origin=self._origin, destination=destination))

    def select_origin(self, origin: str) -> Optional[Route]:
        """
        Change the origin and rebuild the route for the current destination (if any).
        """
        self._origin = origin
        if self._selection is None:
            return None
        return self._apply(Selection(origin=origin, destination=self._selection.destination))

    def close(self) -> None:
        """Teardown: no tick fires after this returns."""
        self.animator.close()
        logger.debug("Route session closed")

    def __enter__(self) -> RouteSession:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # --- Internal helpers ---

    def _apply(self, selection: Selection) -> Optional[Route]:
        self._selection = selection
        route = route_for_selection(
            self.catalog,
            selection,
            segments=self.policy.arc_segments,
            peak_lift=self.policy.peak_lift,
            lift_scale=self.policy.lift_scale,
        )
        self._route = route

        if route is None:
            # nothing to draw; the old flight stops and its cursor is dropped
            self.animator.reset()
            self._fit = None
            return None

        self._fit = compute_fit_directive(route.curve, padding=self.policy.viewport_padding)
        if self.on_fit is not None and self._fit is not None:
            self.on_fit(self._fit)

        self.animator.start(route.curve)
        logger.debug(
            "Flying %s -> %s (%d points, max zoom %d)",
            selection.origin, selection.destination, len(route.curve), self._fit.max_zoom,
        )
        return route

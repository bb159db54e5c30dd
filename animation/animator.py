"""
Purpose: Moves a marker along a route curve one point per tick.
What it does:
Owns the cursor into the current curve and the (position, heading) derived
from it, and drives itself with a single pending timer.

State machine:

    IDLE ──start(curve)──> RUNNING ──tick lands on last point──> DONE
                              ^                                   │
                              └──────────── start(new curve) ─────┘

- start() always cancels the pending tick before resetting to index 0, so two
  tick streams can never touch the same state. This holds even when the new
  curve has the same endpoints as the old one.
- reset() cancels the pending tick and drops back to IDLE (no route any more).
- close() cancels the pending tick for good; nothing fires after it.
- tick() can also be called directly (headless stepping without a scheduler).

Rule: Animator owns cursor/position/heading. Nobody else mutates them.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Sequence

from routing.geodesy import LatLon, compute_bearing
from .models import AnimationState, AnimatorStateError, AnimatorStatus

logger = logging.getLogger(__name__)

FrameListener = Callable[[AnimationState], None]


class Animator:

    def __init__(
            self,
            scheduler: Optional[Any] = None,
            *,
            tick_seconds: float = 0.1,
            on_frame: Optional[FrameListener] = None,
    ):
        """
        Args:
            scheduler: object with call_later(delay_s, callback) -> handle with cancel().
                       None means ticks are only advanced by calling tick() yourself.
            tick_seconds: fixed delay between steps
            on_frame: called with a fresh AnimationState after every state change
        """
        self._scheduler = scheduler
        self._tick_seconds = tick_seconds
        self._on_frame = on_frame

        self._curve: Sequence[LatLon] = ()
        self._cursor_index = 0
        self._position: Optional[LatLon] = None
        self._heading = 0.0
        self._status = AnimatorStatus.IDLE

        self._handle = None  # the one pending timer, if any
        self._closed = False

    # --- Read-only view ---

    @property
    def status(self) -> AnimatorStatus:
        return self._status

    @property
    def curve(self) -> Sequence[LatLon]:
        return self._curve

    @property
    def cursor_index(self) -> int:
        return self._cursor_index

    @property
    def has_pending_tick(self) -> bool:
        return self._handle is not None

    @property
    def closed(self) -> bool:
        return self._closed

    def snapshot(self) -> Optional[AnimationState]:
        """Current state, or None while IDLE."""
        if self._status == AnimatorStatus.IDLE:
            return None
        return AnimationState(
            cursor_index=self._cursor_index,
            position=self._position,
            heading=self._heading,
            status=self._status,
        )

    # --- Lifecycle ---

    def start(self, curve: Sequence[LatLon]) -> AnimationState:
        """
        (Re)start from index 0 on `curve`.
        Any tick still pending for the previous curve is cancelled first.
        """
        if self._closed:
            raise AnimatorStateError("Cannot start a closed animator")
        if not curve:
            raise ValueError("curve must contain at least one point")

        self.cancel()

        self._curve = curve
        self._cursor_index = 0
        self._position = curve[0]

        if len(curve) >= 2:
            self._heading = compute_bearing(curve[0], curve[1])
            self._status = AnimatorStatus.RUNNING
        else:
            # single point: nowhere to go
            self._heading = 0.0
            self._status = AnimatorStatus.DONE

        logger.debug("Animator started on %d points", len(curve))
        state = self._emit()
        self._reschedule_if_current(curve)
        return state

    def tick(self) -> Optional[AnimationState]:
        """
        Advance one curve index. Returns the new state, or None when not RUNNING.
        """
        if self._status != AnimatorStatus.RUNNING:
            return None

        # RUNNING implies cursor < last index
        last_index = len(self._curve) - 1
        next_index = self._cursor_index + 1
        self._heading = compute_bearing(self._curve[self._cursor_index], self._curve[next_index])
        self._position = self._curve[next_index]
        self._cursor_index = next_index

        if next_index == last_index:
            self._status = AnimatorStatus.DONE
            logger.debug("Animator reached the end of the curve")

        return self._emit()

    def cancel(self) -> None:
        """Drop the pending tick (if any). State is left where it is."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def reset(self) -> None:
        """
        Drop the pending tick and forget the curve (back to IDLE).
        Used when there is no route to fly any more.
        """
        self.cancel()
        self._curve = ()
        self._cursor_index = 0
        self._position = None
        self._heading = 0.0
        self._status = AnimatorStatus.IDLE

    def close(self) -> None:
        """Teardown: cancel the pending tick and refuse further starts."""
        self.cancel()
        self._closed = True

    # --- Internal helpers ---

    def _schedule_next(self) -> None:
        if self._scheduler is None or self._closed:
            return
        self._handle = self._scheduler.call_later(self._tick_seconds, self._on_timer)

    def _reschedule_if_current(self, curve: Sequence[LatLon]) -> None:
        # the frame listener may have restarted or closed us; then the newer start owns the timer
        if self._status != AnimatorStatus.RUNNING:
            return
        if self._handle is not None or self._curve is not curve:
            return
        self._schedule_next()

    def _on_timer(self) -> None:
        self._handle = None
        curve = self._curve
        self.tick()
        self._reschedule_if_current(curve)

    def _emit(self) -> AnimationState:
        state = self.snapshot()
        if self._on_frame is not None:
            self._on_frame(state)
        return state

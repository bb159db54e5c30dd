"""
Purpose: Data models for the animation capability.
What it does:
- AnimatorStatus = IDLE | RUNNING | DONE
- AnimationState snapshot handed to the presentation layer on every change

Rule: No timers, no geometry. Models only.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

LatLon = Tuple[float, float]


class AnimatorStatus(str, Enum):
    IDLE = "idle"        # no curve supplied yet
    RUNNING = "running"  # stepping through the curve
    DONE = "done"        # cursor sits on the last point


class AnimatorStateError(Exception):
    """Raised when the animator is used after it has been closed."""
    pass


@dataclass(frozen=True)
class AnimationState:
    """
    Immutable snapshot of the animator.
    heading is the raw bearing in (-180, 180]; the marker is rotated by exactly this value.
    """
    cursor_index: int
    position: LatLon
    heading: float
    status: AnimatorStatus

    @property
    def rotation(self) -> float:
        return self.heading

    @property
    def is_done(self) -> bool:
        return self.status == AnimatorStatus.DONE

"""
Purpose: Central configuration for route animation (single source of truth).
What it does:

Stores all tunable parameters:

TICK_MS = 100            (one curve step per tick)

ARC_SEGMENTS = 200       (curve resolution; total flight time scales with it)

PEAK_LIFT = 10, LIFT_SCALE = 0.1   (arc hump height = 1 degree)

VIEWPORT_PADDING = (50, 50) pixels

Values can be overridden from the environment / .env file:

ROUTE_TICK_MS, ROUTE_ARC_SEGMENTS, ROUTE_CATALOG_PATH

Rule: No logic here, just parameters so you can tune without rewriting code.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Tuple

from dotenv import load_dotenv


@dataclass(frozen=True)
class AnimationPolicy:
    """
    Central configuration for the route animator and the route it animates.
    """

    # --- Animator cadence ---
    # Fixed period between ticks. Not derived from distance or curve length,
    # so a route with more segments simply takes longer to fly.
    tick_ms: int = 100

    # --- Arc shape ---
    arc_segments: int = 200
    peak_lift: float = 10.0
    lift_scale: float = 0.1

    # --- Viewport ---
    viewport_padding: Tuple[int, int] = (50, 50)

    # --- Catalog ---
    # None -> bundled destinations file
    catalog_path: Optional[str] = None

    @property
    def tick_seconds(self) -> float:
        return self.tick_ms / 1000.0

    def validate(self) -> None:
        """
        Basic sanity checks.
        """
        if self.tick_ms <= 0:
            raise ValueError("tick_ms must be > 0")

        if self.arc_segments < 1:
            raise ValueError("arc_segments must be >= 1")

        if len(self.viewport_padding) != 2 or min(self.viewport_padding) < 0:
            raise ValueError("viewport_padding must be two non-negative pixel margins")


def default_animation_policy() -> AnimationPolicy:
    """
    Convenience factory for the default policy.
    """
    p = AnimationPolicy()
    p.validate()
    return p


def policy_from_env() -> AnimationPolicy:
    """
    Build a policy from environment variables (a .env file is read first).
    Unset variables keep their defaults.

    Example in .env:
    ROUTE_TICK_MS=50
    ROUTE_ARC_SEGMENTS=100
    """
    load_dotenv()
    defaults = AnimationPolicy()

    p = AnimationPolicy(
        tick_ms=int(os.getenv("ROUTE_TICK_MS", defaults.tick_ms)),
        arc_segments=int(os.getenv("ROUTE_ARC_SEGMENTS", defaults.arc_segments)),
        catalog_path=os.getenv("ROUTE_CATALOG_PATH") or None,
    )
    p.validate()
    return p

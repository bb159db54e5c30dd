"""
Animation domain package.

Holds the route animator state machine, its timer adapter, the
active-route session and the tunable animation policy.
"""

from .models import AnimationState, AnimatorStatus, AnimatorStateError
from .policy import AnimationPolicy, default_animation_policy, policy_from_env
from .scheduler import AsyncioScheduler
from .animator import Animator
from .session import RouteSession

__all__ = [
    "AnimationState",
    "AnimatorStatus",
    "AnimatorStateError",
    "AnimationPolicy",
    "default_animation_policy",
    "policy_from_env",
    "AsyncioScheduler",
    "Animator",
    "RouteSession",
]

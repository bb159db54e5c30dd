#Purpose: Timer adapter for the animator.
#The animator only needs "call this once after N seconds, and let me cancel it".
#Any object with call_later(delay_s, callback) -> handle-with-cancel() works;
#AsyncioScheduler is the production one, tests pass a manual clock.
#A cancelled handle must never fire.

from __future__ import annotations

import asyncio
from typing import Callable, Optional

TickCallback = Callable[[], None]


class AsyncioScheduler:
    """
    Schedules ticks on an asyncio event loop.
    Returns asyncio.TimerHandle, whose cancel() guarantees the callback does not run.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        # resolved lazily so the scheduler can be built before the loop starts
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def call_later(self, delay: float, callback: TickCallback) -> asyncio.TimerHandle:
        return self.loop.call_later(delay, callback)

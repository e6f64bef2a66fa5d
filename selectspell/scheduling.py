"""
Cancellable delayed callbacks for the cycling-session expiry timer.

The session only needs ``call_later(delay, callback) -> handle`` and
``handle.cancel()``. Three schedulers are provided:

- ThreadingScheduler: ``threading.Timer`` per call (default).
- AsyncioScheduler: an entry on an asyncio loop's timer queue.
- ManualScheduler: a virtual clock the host advances explicitly; used by
  tests and by hosts that pump their own event loop.
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
import logging
import threading
from collections.abc import Callable
from typing import Protocol

logger = logging.getLogger(__name__)


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle: ...


# =============================================================================
# THREADING
# =============================================================================


class ThreadingScheduler:
    """Runs each callback on a daemon ``threading.Timer`` thread."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> threading.Timer:
        timer = threading.Timer(delay, callback)
        timer.daemon = True
        timer.start()
        return timer


# =============================================================================
# ASYNCIO
# =============================================================================


class AsyncioScheduler:
    """
    Schedules callbacks on an asyncio event loop.

    Args:
        loop: Loop to schedule on; defaults to the running loop at call time.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        self.loop = loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        loop = self.loop or asyncio.get_running_loop()
        return loop.call_later(delay, callback)


# =============================================================================
# MANUAL CLOCK
# =============================================================================


class ManualTimer:
    """Handle returned by ManualScheduler."""

    def __init__(self, when: float, callback: Callable[[], None]):
        self.when = when
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """
    Deterministic scheduler driven by ``advance``.

    Example:
        >>> scheduler = ManualScheduler()
        >>> fired = []
        >>> _ = scheduler.call_later(1.0, lambda: fired.append(True))
        >>> scheduler.advance(0.5); fired
        []
        >>> scheduler.advance(0.5); fired
        [True]
    """

    def __init__(self):
        self.now = 0.0
        self._queue: list[tuple[float, int, ManualTimer]] = []
        self._counter = itertools.count()

    def call_later(self, delay: float, callback: Callable[[], None]) -> ManualTimer:
        timer = ManualTimer(self.now + delay, callback)
        heapq.heappush(self._queue, (timer.when, next(self._counter), timer))
        return timer

    @property
    def pending(self) -> int:
        """Number of scheduled callbacks not yet fired or cancelled."""
        return sum(1 for _, _, timer in self._queue if not timer.cancelled)

    def advance(self, seconds: float) -> int:
        """
        Move the clock forward and fire every callback that came due.

        Returns:
            Number of callbacks fired.
        """
        if seconds < 0:
            raise ValueError(f"cannot move the clock backwards ({seconds})")

        target = self.now + seconds
        fired = 0
        while self._queue and self._queue[0][0] <= target:
            when, _, timer = heapq.heappop(self._queue)
            if timer.cancelled:
                continue
            self.now = when
            timer.callback()
            fired += 1
        self.now = target
        return fired

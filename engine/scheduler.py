"""
scheduler.py — Cancellable Recurring Timers
============================================
The playback controller never sleeps or spawns threads itself; it asks
a Scheduler for a recurring callback and gets back a TimerHandle it can
cancel.

CooperativeScheduler is the default: single-threaded, driven by
whoever calls ``poll()`` (the web layer's /tick route, a UI loop, or a
test with a fake clock).  A timer that is several periods overdue fires
once per missed period on the next poll, the way a browser's
setInterval catches up.
"""

import itertools
import logging
import time
from typing import Callable, Dict, Optional

logger = logging.getLogger(__name__)


class TimerHandle:
    """Returned by :meth:`Scheduler.call_every`.  ``cancel()`` is idempotent."""

    __slots__ = ("id", "interval", "callback", "due", "cancelled", "_owner")

    def __init__(self, timer_id: int, interval: float, callback: Callable[[], None],
                 due: float, owner: "Scheduler"):
        self.id        = timer_id
        self.interval  = interval
        self.callback  = callback
        self.due       = due
        self.cancelled = False
        self._owner    = owner

    def cancel(self) -> None:
        if self.cancelled:
            return
        self.cancelled = True
        self._owner._discard(self)
        logger.debug("timer %d cancelled", self.id)

    @property
    def active(self) -> bool:
        return not self.cancelled

    def __repr__(self) -> str:
        state = "cancelled" if self.cancelled else f"due={self.due:.3f}"
        return f"TimerHandle({self.id}, every {self.interval}s, {state})"


class Scheduler:
    """Interface every scheduler implements."""

    def call_every(self, interval: float, callback: Callable[[], None]) -> TimerHandle:
        raise NotImplementedError

    def _discard(self, handle: TimerHandle) -> None:
        raise NotImplementedError


class CooperativeScheduler(Scheduler):
    """
    Attributes:
        clock  : Zero-arg callable returning seconds (time.monotonic by default).
        timers : Live handles keyed by id.
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None):
        self.clock:  Callable[[], float]     = clock or time.monotonic
        self.timers: Dict[int, TimerHandle]  = {}
        self._ids = itertools.count(1)

    def call_every(self, interval: float, callback: Callable[[], None]) -> TimerHandle:
        if interval <= 0:
            raise ValueError("interval must be positive")
        handle = TimerHandle(next(self._ids), interval, callback, self.clock() + interval, self)
        self.timers[handle.id] = handle
        logger.debug("timer %d scheduled every %.3fs", handle.id, interval)
        return handle

    def poll(self) -> int:
        """Fire every due callback.  Returns how many callbacks ran."""
        now = self.clock()
        fired = 0
        for handle in list(self.timers.values()):
            while not handle.cancelled and handle.due <= now:
                handle.due += handle.interval
                handle.callback()
                fired += 1
        return fired

    def cancel_all(self) -> None:
        for handle in list(self.timers.values()):
            handle.cancel()

    @property
    def active_count(self) -> int:
        return len(self.timers)

    def _discard(self, handle: TimerHandle) -> None:
        self.timers.pop(handle.id, None)

"""Deferred callbacks for transient UI effects (e.g. highlight timeouts).

Two interchangeable schedulers:

- ``LoopScheduler`` hands callbacks to the running asyncio loop, for hosts
  that keep a loop alive between events. The bundled surfaces (Streamlit,
  FastAPI, CLI) handle one event per run and use ``ManualScheduler``.
- ``ManualScheduler`` queues callbacks and runs them when ``run_due()`` is
  called, which suits request/response surfaces and tests.
"""

import asyncio
import heapq
import itertools
import time
from typing import Callable, List, Optional, Protocol, Tuple


class Cancellable(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def call_later(self, delay: float, callback: Callable[[], None]) -> Cancellable: ...


class LoopScheduler:
    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(delay, callback)


class TimerHandle:
    def __init__(self, due: float, callback: Callable[[], None]):
        self.due = due
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Cooperative scheduler driven by an injectable clock."""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._queue: List[Tuple[float, int, TimerHandle]] = []
        self._seq = itertools.count()

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        handle = TimerHandle(self._clock() + delay, callback)
        heapq.heappush(self._queue, (handle.due, next(self._seq), handle))
        return handle

    @property
    def pending(self) -> int:
        return sum(1 for _, _, h in self._queue if not h.cancelled)

    def run_due(self) -> int:
        """Run every callback whose due time has passed, oldest first."""
        now = self._clock()
        ran = 0
        while self._queue and self._queue[0][0] <= now:
            _, _, handle = heapq.heappop(self._queue)
            if handle.cancelled:
                continue
            handle.callback()
            ran += 1
        return ran

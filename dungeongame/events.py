"""Synchronous signals and a virtual-time callback scheduler."""

from __future__ import annotations

import heapq
import itertools
from typing import Any, Callable


class Signal:
    """A list of callbacks that are called, in connection order, on emit."""

    def __init__(self) -> None:
        self._callbacks: list[Callable[..., Any]] = []

    def connect(self, callback: Callable[..., Any]) -> Callable[..., Any]:
        """Register a callback and return it unchanged."""
        self._callbacks.append(callback)
        return callback

    def emit(self, *args: Any) -> None:
        """Call every connected callback with the given arguments."""
        for callback in list(self._callbacks):
            callback(*args)


class Scheduler:
    """Runs delayed callbacks against a clock that only moves when told to."""

    def __init__(self) -> None:
        self._now = 0
        self._queue: list[tuple[int, int, Callable[[], Any]]] = []
        self._sequence = itertools.count()

    def call_later(self, delay_ms: int, callback: Callable[[], Any]) -> None:
        """Schedule ``callback`` to run ``delay_ms`` milliseconds from now."""
        if delay_ms < 0:
            raise ValueError("delay must not be negative")
        heapq.heappush(
            self._queue, (self._now + delay_ms, next(self._sequence), callback)
        )

    def advance(self, ms: int) -> int:
        """Move the clock forward, running every callback that falls due.

        Returns the number of callbacks run.
        """
        if ms < 0:
            raise ValueError("cannot move the clock backwards")
        deadline = self._now + ms
        ran = 0
        while self._queue and self._queue[0][0] <= deadline:
            due, _, callback = heapq.heappop(self._queue)
            self._now = due
            callback()
            ran += 1
        self._now = deadline
        return ran

    def run_until_idle(self) -> int:
        """Run callbacks in due order until none are left; return how many ran."""
        ran = 0
        while self._queue:
            due, _, callback = heapq.heappop(self._queue)
            self._now = due
            callback()
            ran += 1
        return ran

    def pending(self) -> int:
        """Number of callbacks still waiting to run."""
        return len(self._queue)
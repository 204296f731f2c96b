"""A session that owns the current window and dispatches timers on a simulated clock."""

from __future__ import annotations

import heapq
import itertools
import sys
from typing import Any, Dict, List, Tuple

INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1


class Session:
    """Keeps the current window, the idle switch and the pending timers.

    Timer listeners are objects with an ``on_timer(value)`` method. Time is
    moved forward with :meth:`advance`, which fires every timer that falls due.
    """

    def __init__(self) -> None:
        self.window: Any = None
        self.idle_function_enabled = False
        self.now = 0
        self._key = INT_MIN
        self._listeners: Dict[int, Tuple[Any, int]] = {}
        self._pending: List[Tuple[int, int, int]] = []
        self._sequence = itertools.count()

    def set_timer(self, msecs: int, listener: Any, value: int = 0) -> int:
        """Call ``listener.on_timer(value)`` after ``msecs`` milliseconds; return the timer key."""
        if msecs < 0:
            raise ValueError("timer delay must not be negative")
        self._key += 1
        if self._key == INT_MAX:
            self._key = INT_MIN
        key = self._key
        self._listeners[key] = (listener, value)
        heapq.heappush(self._pending, (self.now + msecs, next(self._sequence), key))
        return key

    def on_timer(self, key: int) -> None:
        """Fire the timer stored under ``key``, once; unknown keys are ignored."""
        entry = self._listeners.get(key)
        if entry is None:
            return
        listener, value = entry
        listener.on_timer(value)
        self._listeners.pop(key, None)

    def advance(self, msecs: int) -> None:
        """Move the clock forward, firing due timers in order."""
        if msecs < 0:
            raise ValueError("time cannot move backwards")
        target = self.now + msecs
        while self._pending and self._pending[0][0] <= target:
            due, _, key = heapq.heappop(self._pending)
            self.now = due
            self.on_timer(key)
        self.now = target

    def stop(self) -> None:
        """End the program without error."""
        sys.exit(0)
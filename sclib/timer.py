"""Hashed timer wheel driven by caller-supplied timestamps."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

TICK = 16
WHEEL_COUNT = 16
INVALID = 2**64 - 1
"""Timer id that never refers to a timer."""

_MASK32 = 2**32 - 1
_MASK64 = 2**64 - 1
_ENTRY_SIZE = 24
_MAX_WHEEL = (_MASK32 // _ENTRY_SIZE) // WHEEL_COUNT


class TimerFullError(RuntimeError):
    """Raised when no more timers can be added."""


@dataclass
class _Entry:
    timeout: int
    type: int
    data: Any


Callback = Callable[[Any, int, int, Any], None]


class Timer:
    """A timer wheel of ``WHEEL_COUNT`` positions, each ``TICK`` ms wide.

    Timeouts passed to :meth:`add` are relative to the latest timestamp
    the timer has seen.
    """

    max_wheel = _MAX_WHEEL
    """Upper bound on slots per wheel position."""

    def __init__(self, timestamp: int) -> None:
        self._timestamp = timestamp
        self._head = 0
        self._wheel = 0
        self._slots: list[list[_Entry | None]] = [[] for _ in range(WHEEL_COUNT)]

    @property
    def timestamp(self) -> int:
        """The latest timestamp the timer has advanced to."""
        return self._timestamp

    def term(self) -> None:
        """Drop all timers and storage, keeping the current timestamp."""
        self._head = 0
        self._wheel = 0
        self._slots = [[] for _ in range(WHEEL_COUNT)]

    def clear(self) -> None:
        """Remove all timers while keeping the allocated slots."""
        self._head = 0
        for slots in self._slots:
            slots[:] = [None] * len(slots)

    def _expand(self) -> None:
        if self._wheel >= self.max_wheel // 2:
            raise TimerFullError("timer capacity exhausted")
        grow = self._wheel if self._wheel else 4
        for slots in self._slots:
            slots.extend([None] * grow)
        self._wheel += grow

    def add(self, timeout: int, type: int, data: Any) -> int:
        """Schedule a timer ``timeout`` ms from now and return its id.

        Raises TimerFullError if the timer cannot grow any further.
        """
        offset = (timeout // TICK + self._head) & _MASK32
        pos = offset & (WHEEL_COUNT - 1)
        slots = self._slots[pos]
        seq = next((i for i, entry in enumerate(slots) if entry is None), None)
        if seq is None:
            seq = self._wheel
            self._expand()
        slots[seq] = _Entry(timeout + self._timestamp, type, data)
        return (seq << 32) | pos

    def cancel(self, timer_id: int | None) -> None:
        """Cancel the timer with ``timer_id``; INVALID or None is ignored."""
        if timer_id is None or timer_id == INVALID:
            return
        pos = timer_id & _MASK32
        seq = timer_id >> 32
        if pos >= WHEEL_COUNT or seq >= self._wheel:
            raise ValueError(f"unknown timer id {timer_id}")
        self._slots[pos][seq] = None

    def timeout(self, timestamp: int, arg: Any, callback: Callback) -> int:
        """Advance to ``timestamp`` and fire expired timers.

        ``callback(arg, timeout, type, data)`` is called for each expired
        timer. Returns the number of milliseconds until the next check.
        """
        elapsed = (timestamp - self._timestamp) & _MASK64
        next_check = TICK - elapsed if elapsed <= TICK else TICK
        wheels = min(elapsed // TICK, WHEEL_COUNT)
        if wheels == 0:
            return next_check

        head = self._head
        self._timestamp = timestamp
        self._head = (self._head + wheels) & (WHEEL_COUNT - 1)

        for _ in range(wheels):
            # Callbacks may add timers and grow the wheel; only the slots
            # present when this position was reached are visited.
            for i in range(self._wheel):
                slots = self._slots[head]
                entry = slots[i]
                if entry is not None and entry.timeout <= self._timestamp:
                    slots[i] = None
                    callback(arg, entry.timeout, entry.type, entry.data)
            head = (head + 1) & (WHEEL_COUNT - 1)

        return next_check
"""Wall-clock and monotonic time readings, and sleeping."""

from __future__ import annotations

import time

_NS_PER_MS = 1_000_000


def time_ms() -> int:
    """Wall-clock time in milliseconds since the epoch."""
    return time.time_ns() // _NS_PER_MS


def time_ns() -> int:
    """Wall-clock time in nanoseconds since the epoch."""
    return time.time_ns()


def mono_ms() -> int:
    """Monotonic time in milliseconds."""
    return time.monotonic_ns() // _NS_PER_MS


def mono_ns() -> int:
    """Monotonic time in nanoseconds."""
    return time.monotonic_ns()


def sleep(millis: int) -> None:
    """Sleep for ``millis`` milliseconds, resuming after signal interruptions."""
    if millis < 0:
        raise ValueError("sleep duration must not be negative")
    time.sleep(millis / 1000)
"""A joinable worker thread that runs one function with one argument."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any


class ThreadError(RuntimeError):
    """Raised when a thread cannot be started or its function failed."""


class Thread:
    """Run ``fn(arg)`` on a separate thread and collect its return value.

    A thread that was never started, or was already joined, joins
    immediately with ``None`` as its result.
    """

    def __init__(self) -> None:
        self._thread: threading.Thread | None = None
        self._result: Any = None
        self._exception: BaseException | None = None
        self._error = ""

    def __enter__(self) -> "Thread":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.term()

    def _run(self, fn: Callable[[Any], Any], arg: Any) -> None:
        try:
            self._result = fn(arg)
        except BaseException as exc:  # handed back to the joining thread
            self._exception = exc

    def start(self, fn: Callable[[Any], Any], arg: Any) -> None:
        """Start running ``fn(arg)``; raises ThreadError if it cannot start."""
        if self._thread is not None:
            self._error = "thread is already running"
            raise ThreadError(self._error)
        self._result = None
        self._exception = None
        worker = threading.Thread(target=self._run, args=(fn, arg))
        try:
            worker.start()
        except RuntimeError as exc:
            self._error = str(exc)
            raise ThreadError(self._error) from exc
        self._thread = worker

    def join(self) -> Any:
        """Wait for the thread to finish and return what its function returned.

        Raises ThreadError if the function raised.
        """
        worker = self._thread
        if worker is None:
            return None
        worker.join()
        self._thread = None
        result, self._result = self._result, None
        exception, self._exception = self._exception, None
        if exception is not None:
            self._error = str(exception) or type(exception).__name__
            raise ThreadError(self._error) from exception
        return result

    def term(self) -> None:
        """Join the thread, discarding its result."""
        self.join()

    def err(self) -> str:
        """Return the last error message, or an empty string."""
        return self._error
"""Request identifiers — a lock-guarded monotonic counter."""

from __future__ import annotations

import threading


class RequestIdGenerator:
    """Hands out integer request ids, unique per instance.

    ``next()`` is an atomic increment-and-fetch, so the generator can be
    shared between threads.  Sequential calls return strictly increasing
    values starting at *start*.
    """

    def __init__(self, start: int = 1) -> None:
        self._next = start
        self._lock = threading.Lock()

    def next(self) -> int:
        """Allocate and return a fresh id."""
        with self._lock:
            value = self._next
            self._next += 1
        return value

    def __iter__(self) -> RequestIdGenerator:
        return self

    def __next__(self) -> int:
        return self.next()

    def __repr__(self) -> str:
        return f"RequestIdGenerator(next={self._next})"


_default = RequestIdGenerator()


def default_generator() -> RequestIdGenerator:
    """Return the process-wide generator used when none is injected."""
    return _default

"""Synchronisation helpers shared by the download threads."""

from __future__ import annotations

import threading
import time
from typing import Iterable, List, Optional

_POLL_INTERVAL = 0.01


class WaitError(Exception):
    """A wait on a set of events did not complete."""


class ResetError(Exception):
    """An event could not be reset."""


class SlotsLock:
    """A lock guarding the download slots.

    Every instance shares one underlying binary semaphore.
    """

    _semaphore = threading.BoundedSemaphore(1)
    _counter_lock = threading.Lock()
    _instances = 0

    def __init__(self) -> None:
        with SlotsLock._counter_lock:
            SlotsLock._instances += 1
            self.name = f"slotsSem-{SlotsLock._instances}"

    def acquire(self, timeout: Optional[float] = None) -> bool:
        """Take the lock; return False if ``timeout`` seconds pass first."""
        if timeout is None:
            return self._semaphore.acquire()
        return self._semaphore.acquire(timeout=timeout)

    def release(self) -> None:
        """Give the lock back."""
        try:
            self._semaphore.release()
        except ValueError as exc:
            raise RuntimeError("slots lock released while not held") from exc

    def __enter__(self) -> "SlotsLock":
        self.acquire()
        return self

    def __exit__(self, *args) -> None:
        self.release()


class MultiEvents:
    """Wait for any one of several events and reset them one at a time."""

    def __init__(self, events: Iterable[threading.Event]) -> None:
        self._events: List[threading.Event] = list(events)
        if not self._events:
            raise ValueError("at least one event is required")
        self._signalled = [False] * len(self._events)

    def wait(self, timeout: Optional[float] = None) -> int:
        """Block until an event is set and return the lowest set index."""
        deadline = None if timeout is None else time.monotonic() + timeout
        while True:
            for index, event in enumerate(self._events):
                if event.is_set():
                    self._signalled[index] = True
                    return index
            pause = _POLL_INTERVAL
            if deadline is not None:
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    raise WaitError("timed out waiting for events")
                pause = min(pause, remaining)
            time.sleep(pause)

    def reset(self, index: int) -> None:
        """Clear the event at ``index``, which a wait must have returned."""
        if not 0 <= index < len(self._events):
            raise ResetError(f"event index {index} out of range")
        if not self._signalled[index]:
            raise ResetError(f"event {index} has not been signalled")
        self._events[index].clear()
        self._signalled[index] = False
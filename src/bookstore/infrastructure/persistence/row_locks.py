"""Per-row exclusive locks shared by every unit of work in the process."""

from __future__ import annotations

import threading
from collections.abc import Hashable


class RowLocks:
    """A registry of one ``threading.Lock`` per row key.

    Locks are created on first use and never discarded; there is one per
    client that has ever been locked.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[Hashable, threading.Lock] = {}

    def acquire(self, key: Hashable) -> None:
        with self._guard:
            lock = self._locks.setdefault(key, threading.Lock())
        lock.acquire()

    def release(self, key: Hashable) -> None:
        with self._guard:
            lock = self._locks[key]
        lock.release()

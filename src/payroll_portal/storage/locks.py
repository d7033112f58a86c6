from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Dict, Iterator

from .row_store import RowStore


class PartitionLocks:
    """Lock per partition name.

    Serializes read-modify-write sequences (scan then update/append/delete):
    an in-process lock orders threads, and the store's ``exclusive`` scope
    orders other processes sharing the same backend.
    """

    def __init__(self, store: RowStore):
        self._store = store
        self._guard = threading.Lock()
        self._locks: Dict[str, threading.RLock] = {}

    def _get(self, name: str) -> threading.RLock:
        with self._guard:
            lock = self._locks.get(name)
            if lock is None:
                lock = threading.RLock()
                self._locks[name] = lock
            return lock

    @contextmanager
    def hold(self, name: str) -> Iterator[None]:
        lock = self._get(name)
        with lock:
            with self._store.exclusive(name):
                yield

from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Dict, Tuple

from ..core.exceptions import RateLimitedError
from ..core import messages

logger = logging.getLogger(__name__)


class RateLimiter:
    """Fixed-window call counter per caller key.

    One instance is owned by the container and shared by all requests of the
    process; ``limit_per_minute <= 0`` disables limiting.
    """

    def __init__(self, limit_per_minute: int, *, window_seconds: float = 60.0, clock: Callable[[], float] = time.monotonic):
        self._limit = int(limit_per_minute)
        self._window = float(window_seconds)
        self._clock = clock
        self._lock = threading.Lock()
        self._windows: Dict[str, Tuple[float, int]] = {}
        self._last_sweep = clock()

    @property
    def enabled(self) -> bool:
        return self._limit > 0

    def hit(self, key: str) -> None:
        if not self.enabled:
            return

        now = self._clock()
        with self._lock:
            if now - self._last_sweep >= self._window:
                self._sweep(now)
            started, calls = self._windows.get(key, (now, 0))
            if now - started >= self._window:
                started, calls = now, 0
            if calls >= self._limit:
                logger.warning("Rate limit exceeded: %d calls within %.0fs", calls, self._window)
                raise RateLimitedError(messages.TOO_MANY_REQUESTS)
            self._windows[key] = (started, calls + 1)

    def _sweep(self, now: float) -> None:
        expired = [k for k, (started, _) in self._windows.items() if now - started >= self._window]
        for k in expired:
            del self._windows[k]
        self._last_sweep = now

    @property
    def tracked_keys(self) -> int:
        with self._lock:
            return len(self._windows)

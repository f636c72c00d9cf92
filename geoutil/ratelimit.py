"""A token-bucket rate limiter for outgoing requests."""

from __future__ import annotations

import math
import threading
import time


class RateLimitTimeout(TimeoutError):
    """Raised when waiting for a request slot would exceed the allowed time."""


class RateLimiter:
    """Token bucket allowing ``rate`` events per second with bursts of ``burst``.

    The bucket starts full. A ``rate`` of ``math.inf`` imposes no limit.
    """

    def __init__(self, rate: float, burst: int = 1) -> None:
        if not rate > 0:
            raise ValueError("rate must be positive")
        if burst < 1:
            raise ValueError("burst must be at least 1")
        self.rate = float(rate)
        self.burst = burst
        self._tokens = float(burst)
        self._stamp = time.monotonic()
        self._lock = threading.Lock()

    def wait(self, timeout: float | None = None) -> float:
        """Block until an event may happen and return the seconds waited.

        If the wait would take longer than ``timeout`` seconds, no slot is
        taken and :class:`RateLimitTimeout` is raised at once.
        """
        if math.isinf(self.rate):
            return 0.0
        with self._lock:
            now = time.monotonic()
            elapsed = max(0.0, now - self._stamp)
            self._tokens = min(float(self.burst), self._tokens + elapsed * self.rate)
            self._stamp = now
            self._tokens -= 1.0
            delay = -self._tokens / self.rate if self._tokens < 0 else 0.0
            if timeout is not None and delay > timeout:
                self._tokens += 1.0
                raise RateLimitTimeout(
                    f"wait of {delay:.3f}s would exceed timeout of {timeout:.3f}s"
                )
        if delay > 0:
            time.sleep(delay)
        return delay
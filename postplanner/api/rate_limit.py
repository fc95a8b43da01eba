"""Per-client rate limiting for the parse endpoint.

Design:
- Fixed window per client key (forwarded IP, then peer address).
- Per-process, in-memory; with several workers each one keeps its own budget.
"""

from __future__ import annotations

import logging
import math
import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict

from fastapi import HTTPException, Request, status

from postplanner.config import RATE_LIMIT_POINTS, RATE_LIMIT_WINDOW_SEC

logger = logging.getLogger(__name__)


class RateLimitExceeded(HTTPException):
    pass


@dataclass(slots=True)
class _Window:
    start: float
    count: int


class InMemoryRateLimiter:
    """Allow `points` requests per `duration_sec` window for each key."""

    def __init__(
        self,
        *,
        points: int,
        duration_sec: int,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.points = points
        self.duration_sec = duration_sec
        self._clock = clock
        self._windows: Dict[str, _Window] = {}
        self._lock = threading.Lock()
        self._last_sweep = clock()

    def consume(self, key: str) -> int:
        """Count one request for `key`.

        Returns:
            Requests remaining in the current window

        Raises:
            RateLimitExceeded: When the window's budget is already spent
        """
        with self._lock:
            now = self._clock()
            if now - self._last_sweep >= self.duration_sec:
                self._evict_expired(now)
            window = self._windows.get(key)
            if window is None or now - window.start >= self.duration_sec:
                window = _Window(start=now, count=0)
                self._windows[key] = window

            reset_at = window.start + self.duration_sec
            if window.count >= self.points:
                retry_after = max(math.ceil(reset_at - now), 1)
                logger.warning(f"Rate limit exceeded for {key}; retry in {retry_after}s")
                raise RateLimitExceeded(
                    status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                    detail="Rate limit exceeded",
                    headers={
                        "X-RateLimit-Limit": str(self.points),
                        "X-RateLimit-Remaining": "0",
                        "X-RateLimit-Reset": str(math.ceil(reset_at)),
                        "Retry-After": str(retry_after),
                    },
                )

            window.count += 1
            return self.points - window.count

    def _evict_expired(self, now: float) -> None:
        """Drop windows that have fully elapsed. Caller holds the lock."""
        expired = [key for key, window in self._windows.items() if now - window.start >= self.duration_sec]
        for key in expired:
            del self._windows[key]
        self._last_sweep = now
        if expired:
            logger.debug(f"Evicted {len(expired)} expired rate-limit windows")

    def __len__(self) -> int:
        with self._lock:
            return len(self._windows)

    def reset(self) -> None:
        with self._lock:
            self._windows.clear()


def client_key(request: Request) -> str:
    """Identify the caller: first X-Forwarded-For hop, X-Real-IP, then peer host."""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    real_ip = request.headers.get("x-real-ip")
    if real_ip:
        return real_ip.strip()
    if request.client and request.client.host:
        return request.client.host
    return "unknown"


API_LIMITER = InMemoryRateLimiter(points=RATE_LIMIT_POINTS, duration_sec=RATE_LIMIT_WINDOW_SEC)


def enforce_rate_limit(request: Request) -> None:
    """FastAPI dependency: spend one request of the caller's budget."""
    API_LIMITER.consume(client_key(request))

"""Per-client request windows for endpoints that call NASA POWER."""

from __future__ import annotations

import time
from collections import deque
from collections.abc import Callable

from fastapi import HTTPException, Request, status

from solora_api.config import settings


class RateLimiter:
    """Sliding-window limiter keyed by client IP.

    Clients whose window has emptied are forgotten, so the table only holds
    callers seen within the last ``window_seconds``.
    """

    def __init__(
        self,
        max_requests: int,
        window_seconds: float = 60.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._windows: dict[str, deque[float]] = {}

    @staticmethod
    def client_ip(request: Request) -> str:
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            return forwarded.split(",")[0].strip()
        return request.client.host if request.client else "unknown"

    @property
    def tracked_clients(self) -> int:
        return len(self._windows)

    def _expire(self, now: float) -> None:
        cutoff = now - self.window_seconds
        for ip in list(self._windows):
            window = self._windows[ip]
            while window and window[0] <= cutoff:
                window.popleft()
            if not window:
                del self._windows[ip]

    def hit(self, ip: str) -> bool:
        """Record a request from *ip*; False when it is over the limit."""
        now = self._clock()
        self._expire(now)

        window = self._windows.get(ip)
        if window is not None and len(window) >= self.max_requests:
            return False
        self._windows.setdefault(ip, deque()).append(now)
        return True

    def check(self, request: Request) -> None:
        """Raise 429 once the client has used up its window."""
        if not self.hit(self.client_ip(request)):
            raise HTTPException(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                detail=(
                    f"Irradiance lookups limited to {self.max_requests} "
                    f"per {self.window_seconds:g}s"
                ),
            )

    def reset(self) -> None:
        self._windows.clear()


irradiance_limiter = RateLimiter(max_requests=settings.irradiance_rate_limit)

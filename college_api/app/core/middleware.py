"""
HTTP middleware: access logging, security headers and rate limiting.

All three are plain Starlette ``BaseHTTPMiddleware`` subclasses and are
installed by ``create_app``.  The rate limiter keeps one fixed window
per client address in process memory.
"""

import logging
import math
import threading
import time
from typing import Callable, Dict, List, Optional, Tuple

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "Cross-Origin-Resource-Policy": "same-origin",
    "X-DNS-Prefetch-Control": "off",
}

RATE_LIMIT_MESSAGE = "Too many requests, please try again later."


def client_address(request: Request) -> str:
    """Best guess of the caller's address, honouring proxy headers."""
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()
    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip
    return request.client.host if request.client else "unknown"


class FixedWindowRateLimiter:
    """Allow ``max_requests`` per client within each window."""

    # Upper bound on tracked clients.  Stale windows are swept first;
    # if that is not enough the oldest windows are dropped.
    max_clients = 10000

    def __init__(
        self,
        max_requests: int,
        window_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._windows: Dict[str, List[float]] = {}
        self._lock = threading.Lock()

    def hit(self, client_id: str) -> Tuple[bool, int]:
        """Count one request; return ``(allowed, seconds_until_reset)``."""
        with self._lock:
            now = self._clock()
            window = self._windows.get(client_id)
            if window is None or now - window[0] >= self.window_seconds:
                if len(self._windows) >= self.max_clients:
                    self._sweep(now)
                window = [now, 0]
                self._windows[client_id] = window
            window[1] += 1
            reset_in = max(1, math.ceil(window[0] + self.window_seconds - now))
            return window[1] <= self.max_requests, reset_in

    def _sweep(self, now: float) -> None:
        stale = [k for k, w in self._windows.items() if now - w[0] >= self.window_seconds]
        for key in stale:
            del self._windows[key]
        excess = len(self._windows) - self.max_clients + 1
        if excess > 0:
            oldest = sorted(self._windows.items(), key=lambda kv: kv[1][0])[:excess]
            for key, _ in oldest:
                del self._windows[key]


class RateLimitMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, limiter: FixedWindowRateLimiter):
        super().__init__(app)
        self.limiter = limiter

    async def dispatch(self, request: Request, call_next):
        client_id = client_address(request)
        allowed, reset_in = self.limiter.hit(client_id)
        if not allowed:
            logger.warning("Rate limit exceeded for %s on %s", client_id, request.url.path)
            return JSONResponse(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                content={"detail": RATE_LIMIT_MESSAGE},
                headers={"Retry-After": str(reset_in)},
            )
        return await call_next(request)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, headers: Optional[Dict[str, str]] = None):
        super().__init__(app)
        self.headers = headers or SECURITY_HEADERS

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        for name, value in self.headers.items():
            response.headers.setdefault(name, value)
        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """One access log line per request."""

    async def dispatch(self, request: Request, call_next):
        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.info(
                '%s "%s %s" failed after %.1fms',
                client_address(request),
                request.method,
                request.url.path,
                (time.perf_counter() - start_time) * 1000,
            )
            raise
        logger.info(
            '%s "%s %s" %d %.1fms',
            client_address(request),
            request.method,
            request.url.path,
            response.status_code,
            (time.perf_counter() - start_time) * 1000,
        )
        return response

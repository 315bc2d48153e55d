"""
Bev's Bakery Backend - Rate Limiting Middleware
================================================

What:  Per-IP sliding window rate limiter.
How:   Keeps the timestamps of each IP's recent requests in memory; a request
       arriving when the window already holds `rate_limit_requests` entries
       is answered with 429 and a Retry-After header.

Algorithm: Sliding Window Log
    1. Drop timestamps older than the window
    2. If the remaining count >= limit, reject
    3. Otherwise record now and let the request through

State is per process. With several workers each one counts separately,
so the effective limit is `workers * rate_limit_requests`.
"""

import logging
import time
from collections import defaultdict
from typing import Callable, Dict, List, Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.types import ASGIApp

from bakery.config import settings
from bakery.exceptions import RateLimitExceededError

logger = logging.getLogger(__name__)

CLEANUP_EVERY = 1000


class RateLimitMiddleware(BaseHTTPMiddleware):
    """
    In-memory sliding window rate limiter.

    Excluded paths:
        /health and the API docs are never limited.

    Args:
        max_requests / window_seconds: default to the values in settings;
            tests pass small numbers directly.
        clock: time source, replaceable in tests.
    """

    EXCLUDED_PATHS = {"/health", "/docs", "/openapi.json", "/redoc"}

    def __init__(
        self,
        app: ASGIApp,
        max_requests: Optional[int] = None,
        window_seconds: Optional[int] = None,
        clock: Callable[[], float] = time.time,
    ):
        super().__init__(app)
        self.max_requests = max_requests or settings.rate_limit_requests
        self.window_seconds = window_seconds or settings.rate_limit_window
        self._clock = clock
        self._requests: Dict[str, List[float]] = defaultdict(list)
        self._seen = 0

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in self.EXCLUDED_PATHS:
            return await call_next(request)

        client_ip = request.client.host if request.client else "unknown"
        retry_after = self.check(client_ip)
        if retry_after is not None:
            exc = RateLimitExceededError(retry_after=retry_after)
            logger.warning(
                "Rate limit exceeded for IP %s: %d requests in %ds window",
                client_ip,
                len(self._requests[client_ip]),
                self.window_seconds,
            )
            return JSONResponse(
                status_code=429,
                content={
                    "error": "rate_limit_exceeded",
                    "message": exc.message,
                    "details": exc.context,
                },
                headers={"Retry-After": str(exc.retry_after)},
            )

        return await call_next(request)

    def check(self, client_ip: str) -> Optional[int]:
        """
        Record a request from client_ip.

        Returns:
            None when the request is allowed, otherwise the number of seconds
            until the oldest request in the window expires.
        """
        now = self._clock()
        window_start = now - self.window_seconds

        timestamps = [ts for ts in self._requests[client_ip] if ts > window_start]
        self._requests[client_ip] = timestamps

        if len(timestamps) >= self.max_requests:
            return int(timestamps[0] + self.window_seconds - now) + 1

        timestamps.append(now)

        self._seen += 1
        if self._seen % CLEANUP_EVERY == 0:
            self._cleanup_inactive_ips(window_start)
        return None

    def _cleanup_inactive_ips(self, window_start: float) -> None:
        """Forget IPs whose newest request has left the window."""
        inactive_ips = [
            ip for ip, timestamps in self._requests.items()
            if not timestamps or timestamps[-1] <= window_start
        ]
        for ip in inactive_ips:
            del self._requests[ip]

        if inactive_ips:
            logger.debug("Cleaned up %d inactive IP entries", len(inactive_ips))

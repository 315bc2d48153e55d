"""
Bev's Bakery Backend - Rate Limiter Tests
==========================================

What:  RateLimitMiddleware on a tiny app with a controllable clock.
"""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from bakery.middleware.rate_limit import RateLimitMiddleware


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


def build_app(clock: FakeClock, max_requests: int = 2) -> FastAPI:
    app = FastAPI()
    app.add_middleware(
        RateLimitMiddleware, max_requests=max_requests, window_seconds=60, clock=clock
    )

    @app.get("/ping")
    async def ping():
        return {"ok": True}

    @app.get("/health")
    async def health():
        return {"status": "healthy"}

    return app


class TestCheck:

    def test_allows_up_to_limit(self):
        limiter = RateLimitMiddleware(FastAPI(), max_requests=2, window_seconds=60, clock=FakeClock())

        assert limiter.check("1.2.3.4") is None
        assert limiter.check("1.2.3.4") is None
        assert limiter.check("1.2.3.4") == 61

    def test_window_slides(self):
        clock = FakeClock()
        limiter = RateLimitMiddleware(FastAPI(), max_requests=1, window_seconds=60, clock=clock)

        assert limiter.check("1.2.3.4") is None
        clock.now += 30
        assert limiter.check("1.2.3.4") == 31
        clock.now += 31
        assert limiter.check("1.2.3.4") is None

    def test_ips_are_counted_separately(self):
        limiter = RateLimitMiddleware(FastAPI(), max_requests=1, window_seconds=60, clock=FakeClock())

        assert limiter.check("1.1.1.1") is None
        assert limiter.check("2.2.2.2") is None


class TestMiddleware:

    @pytest.mark.asyncio
    async def test_rejects_with_429(self):
        app = build_app(FakeClock())
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            await client.get("/ping")
            await client.get("/ping")
            response = await client.get("/ping")

        assert response.status_code == 429
        assert response.json()["error"] == "rate_limit_exceeded"
        assert response.headers["Retry-After"] == "61"

    @pytest.mark.asyncio
    async def test_health_not_limited(self):
        app = build_app(FakeClock(), max_requests=1)
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            responses = [await client.get("/health") for _ in range(5)]

        assert all(r.status_code == 200 for r in responses)

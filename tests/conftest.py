from __future__ import annotations

import os
from typing import Callable, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

os.environ.setdefault("WEBSITES", "[]")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.pop("SCORECARD_TOKEN", None)

from uptime_monitor.config import Settings
from uptime_monitor.main import create_app
from uptime_monitor.services.checker import CheckerService, ProbeResult
from uptime_monitor.services.history import HistoryStore
from uptime_monitor.services.registry import WebsiteRegistry

Handler = Callable[[httpx.Request], httpx.Response]


class FakeClock:
    """Monotonic clock the mock transport advances to simulate latency."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms / 1000


class HostRouter:
    """Routes mock requests to per-host handlers; unknown hosts are refused."""

    def __init__(self) -> None:
        self.handlers: dict[str, Handler] = {}
        self.calls: list[str] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request.url.host)
        handler = self.handlers.get(request.url.host)
        if handler is None:
            raise httpx.ConnectError("connection refused", request=request)
        return handler(request)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def respond(clock: FakeClock):
    """Factory for a handler that answers after ``ms`` of simulated latency."""

    def factory(ms: float, status_code: int = 200) -> Handler:
        def handler(request: httpx.Request) -> httpx.Response:
            clock.advance(ms)
            return httpx.Response(status_code, text="ok")

        return handler

    return factory


@pytest.fixture
def fail(clock: FakeClock):
    """Factory for a handler that raises a transport error after ``ms``."""

    def factory(ms: float, exc_type=httpx.ConnectError) -> Handler:
        def handler(request: httpx.Request) -> httpx.Response:
            clock.advance(ms)
            raise exc_type("simulated failure", request=request)

        return handler

    return factory


@pytest.fixture
def hosts() -> HostRouter:
    return HostRouter()


@pytest.fixture
def checker(clock: FakeClock, hosts: HostRouter) -> CheckerService:
    return CheckerService(
        timeout_ms=10000,
        threshold_ms=5000,
        transport=httpx.MockTransport(hosts),
        clock=clock,
    )


@pytest.fixture
def history() -> HistoryStore:
    return HistoryStore(limit=1000, combined_limit=1000)


@pytest.fixture
def registry(history: HistoryStore) -> WebsiteRegistry:
    return WebsiteRegistry(history, default_interval_ms=5000)


@pytest.fixture
def make_result():
    def factory(status: str = "up", response_time: int = 100, timestamp: Optional[str] = None) -> ProbeResult:
        return ProbeResult(
            status=status,
            response_time=response_time,
            timestamp=timestamp or "2026-01-01T00:00:00+00:00",
        )

    return factory


@pytest.fixture
def settings() -> Settings:
    return Settings(
        websites=[],
        check_interval_ms=5000,
        response_threshold_ms=5000,
        probe_timeout_ms=10000,
        scorecard_token=None,
    )


@pytest.fixture
def app(settings: Settings, hosts: HostRouter, clock: FakeClock, monkeypatch):
    app = create_app(settings, transport=httpx.MockTransport(hosts))
    monkeypatch.setattr(app.state.monitor.checker, "_clock", clock)
    return app


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)

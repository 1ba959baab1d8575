"""Monitor state container and request dependencies."""
from dataclasses import dataclass
from typing import Optional

import httpx
from fastapi import Request

from .config import Settings
from .services.checker import CheckerService
from .services.history import HistoryStore
from .services.registry import WebsiteRegistry
from .services.scheduler import SchedulerService
from .services.scorecard import ScorecardClient


@dataclass
class MonitorState:
    """Everything the API and the poll loop share, owned by one app instance."""
    settings: Settings
    history: HistoryStore
    registry: WebsiteRegistry
    checker: CheckerService
    scheduler: SchedulerService
    scorecard: ScorecardClient


def build_state(
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> MonitorState:
    """Wire up the store, registry, checker, and scheduler from settings."""
    history = HistoryStore(
        limit=settings.history_limit,
        combined_limit=settings.combined_history_limit,
    )
    registry = WebsiteRegistry(history, default_interval_ms=settings.check_interval_ms)
    checker = CheckerService(
        timeout_ms=settings.probe_timeout_ms,
        threshold_ms=settings.response_threshold_ms,
        transport=transport,
    )
    scheduler = SchedulerService(
        registry,
        checker,
        interval_ms=settings.check_interval_ms,
        max_concurrent_checks=settings.max_concurrent_checks,
    )
    scorecard = ScorecardClient(
        settings.scorecard_url,
        settings.scorecard_token,
        timeout_ms=settings.scorecard_timeout_ms,
    )
    return MonitorState(
        settings=settings,
        history=history,
        registry=registry,
        checker=checker,
        scheduler=scheduler,
        scorecard=scorecard,
    )


def get_state(request: Request) -> MonitorState:
    """Dependency to get the app's monitor state."""
    return request.app.state.monitor


def get_registry(request: Request) -> WebsiteRegistry:
    return get_state(request).registry


def get_history(request: Request) -> HistoryStore:
    return get_state(request).history


def get_scorecard(request: Request) -> ScorecardClient:
    return get_state(request).scorecard

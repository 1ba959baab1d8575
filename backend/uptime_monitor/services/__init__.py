"""Services for probing, scheduling, and history."""
from .checker import CheckerService, ProbeResult
from .history import HistoryStore
from .registry import WebsiteRegistry, InvalidWebsiteError
from .scheduler import SchedulerService
from .scorecard import ScorecardClient, UpstreamUnavailableError
from .stats import UptimeStats, calculate_uptime_stats

__all__ = [
    "CheckerService",
    "ProbeResult",
    "HistoryStore",
    "WebsiteRegistry",
    "InvalidWebsiteError",
    "SchedulerService",
    "ScorecardClient",
    "UpstreamUnavailableError",
    "UptimeStats",
    "calculate_uptime_stats",
]

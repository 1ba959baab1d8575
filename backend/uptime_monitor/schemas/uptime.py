"""Uptime check and stats schemas for the dashboard."""
from typing import Literal, Optional

from .website import CamelModel

Status = Literal["up", "slow", "down"]


class FeedEntry(CamelModel):
    """Combined feed entry, tagged with the website it belongs to."""
    timestamp: str
    status: Status
    response_time: int
    website_name: str


class CheckResponse(CamelModel):
    """A single check in a website's history."""
    id: str
    website_id: str
    timestamp: str
    status: Status
    response_time: int


class LastCheck(CamelModel):
    """Most recent check in a stats window."""
    timestamp: str
    status: Status
    response_time: int
    website_name: Optional[str] = None


class UptimeStatsResponse(CamelModel):
    """Aggregate stats over a window of checks."""
    total_checks: int
    uptime: float
    average_response_time: float
    last_check: LastCheck

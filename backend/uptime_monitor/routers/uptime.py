"""Combined uptime feed API for the dashboard."""
from typing import List, Sequence

from fastapi import APIRouter, Depends

from ..models import UptimeCheck
from ..schemas.uptime import FeedEntry, LastCheck, UptimeStatsResponse
from ..services.stats import calculate_uptime_stats
from ..state import MonitorState, get_state

router = APIRouter(prefix="/api/uptime", tags=["uptime"])


def stats_response(checks: Sequence[UptimeCheck]) -> UptimeStatsResponse:
    """Build the stats payload for a window of checks."""
    stats = calculate_uptime_stats(checks)
    last = stats.last_check
    return UptimeStatsResponse(
        total_checks=stats.total_checks,
        uptime=stats.uptime,
        average_response_time=stats.average_response_time,
        last_check=LastCheck(
            timestamp=last.timestamp,
            status=last.status,
            response_time=last.response_time,
            website_name=getattr(last, "website_name", None),
        ),
    )


def _feed(state: MonitorState) -> List[UptimeCheck]:
    return state.history.combined(state.settings.feed_limit)


@router.get("", response_model=List[FeedEntry])
async def get_uptime_feed(state: MonitorState = Depends(get_state)):
    """Latest checks across all websites, oldest first."""
    return [
        FeedEntry(
            timestamp=check.timestamp,
            status=check.status,
            response_time=check.response_time,
            website_name=check.website_name,
        )
        for check in _feed(state)
    ]


@router.get("/stats", response_model=UptimeStatsResponse)
async def get_uptime_feed_stats(state: MonitorState = Depends(get_state)):
    """Stats over the same window the feed returns."""
    return stats_response(_feed(state))

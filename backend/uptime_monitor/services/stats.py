"""Uptime statistics over a slice of check history."""
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Sequence, Union

from ..models import UptimeCheck
from .checker import ProbeResult


@dataclass(frozen=True)
class UptimeStats:
    """Aggregate view of a check history."""
    total_checks: int
    uptime: float  # percent of checks that were strictly "up"
    average_response_time: float  # ms, down checks included
    last_check: Union[UptimeCheck, ProbeResult]


def calculate_uptime_stats(checks: Sequence[UptimeCheck]) -> UptimeStats:
    """Compute uptime stats for checks ordered oldest to newest.

    Slow checks count against uptime. With no checks, last_check is a
    synthetic down result stamped now.
    """
    total_checks = len(checks)
    if total_checks == 0:
        return UptimeStats(
            total_checks=0,
            uptime=0.0,
            average_response_time=0.0,
            last_check=ProbeResult(
                status="down",
                response_time=0,
                timestamp=datetime.now(timezone.utc).isoformat(),
            ),
        )

    up_checks = sum(1 for check in checks if check.status == "up")
    return UptimeStats(
        total_checks=total_checks,
        uptime=up_checks / total_checks * 100,
        average_response_time=sum(check.response_time for check in checks) / total_checks,
        last_check=checks[-1],
    )

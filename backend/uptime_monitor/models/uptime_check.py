"""UptimeCheck model - result of one probe against a website."""
from dataclasses import dataclass
from typing import Literal

CheckStatus = Literal["up", "slow", "down"]


@dataclass(frozen=True)
class UptimeCheck:
    """Immutable probe outcome, owned by the history store."""
    id: str
    website_id: str
    website_name: str
    timestamp: str  # ISO-8601, probe completion time
    status: CheckStatus
    response_time: int  # milliseconds, never negative
    sequence: int = 0  # process-wide arrival order

"""Website model - a monitored endpoint."""
from dataclasses import dataclass, field
from datetime import datetime, timezone


def utc_now_iso() -> str:
    """Current UTC time as an ISO-8601 string."""
    return datetime.now(timezone.utc).isoformat()


@dataclass
class Website:
    """A URL that is periodically health-checked."""
    id: str
    name: str
    url: str
    interval: int  # milliseconds
    is_active: bool = True
    created_at: str = field(default_factory=utc_now_iso)

"""History store - bounded per-website log of uptime checks."""
import heapq
import itertools
import logging
import threading
import uuid
from collections import deque
from typing import Deque, Dict, List, Optional

from ..models import UptimeCheck
from .checker import ProbeResult

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 1000


class HistoryStore:
    """Bounded in-memory history of uptime checks, keyed by website id.

    Each website keeps at most ``limit`` checks; appending past the cap
    evicts the oldest entry. The combined feed is a read-time merge of all
    websites in arrival order, capped at ``combined_limit``.

    A single lock serializes writes. Reads return copies so callers never
    see a sequence mid-update.
    """

    def __init__(
        self,
        limit: int = DEFAULT_HISTORY_LIMIT,
        combined_limit: int = DEFAULT_HISTORY_LIMIT,
    ):
        if limit <= 0 or combined_limit <= 0:
            raise ValueError("History limits must be positive")
        self.limit = limit
        self.combined_limit = combined_limit
        self._checks: Dict[str, Deque[UptimeCheck]] = {}
        self._sequence = itertools.count(1)
        self._lock = threading.Lock()

    def ensure(self, website_id: str) -> None:
        """Create an empty history for a website if it has none."""
        with self._lock:
            self._checks.setdefault(website_id, deque(maxlen=self.limit))

    def append(self, website_id: str, website_name: str, result: ProbeResult) -> UptimeCheck:
        """Record a probe result and return the stored check."""
        with self._lock:
            check = UptimeCheck(
                id=str(uuid.uuid4()),
                website_id=website_id,
                website_name=website_name,
                timestamp=result.timestamp,
                status=result.status,
                response_time=result.response_time,
                sequence=next(self._sequence),
            )
            history = self._checks.get(website_id)
            if history is None:
                history = self._checks[website_id] = deque(maxlen=self.limit)
            history.append(check)
        return check

    def recent(self, website_id: str, n: Optional[int] = None) -> List[UptimeCheck]:
        """Return the last ``n`` checks for a website, oldest first.

        ``None`` returns the full history. Unknown websites yield an empty list.
        """
        if n is not None and n <= 0:
            return []
        with self._lock:
            history = self._checks.get(website_id)
            if not history:
                return []
            checks = list(history)
        return checks if n is None else checks[-n:]

    def combined(self, n: Optional[int] = None) -> List[UptimeCheck]:
        """Return the combined feed across all websites, oldest first."""
        if n is not None and n <= 0:
            return []
        with self._lock:
            snapshots = [list(h) for h in self._checks.values() if h]

        merged = list(heapq.merge(*snapshots, key=lambda c: c.sequence))
        merged = merged[-self.combined_limit:]
        return merged if n is None else merged[-n:]

    def purge(self, website_id: str) -> bool:
        """Drop a website's entire history. Returns False if none existed."""
        with self._lock:
            removed = self._checks.pop(website_id, None)
        if removed is not None:
            logger.debug(f"Purged {len(removed)} checks for website {website_id}")
        return removed is not None

    def count(self, website_id: str) -> int:
        """Number of checks retained for a website."""
        with self._lock:
            history = self._checks.get(website_id)
            return len(history) if history else 0

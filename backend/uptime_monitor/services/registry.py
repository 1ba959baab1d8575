"""Website registry - the set of monitored targets."""
import logging
import threading
import uuid
from dataclasses import replace
from typing import Any, Dict, Iterable, List, Mapping, Optional

import httpx

from ..models import UptimeCheck, Website
from .checker import ProbeResult
from .history import HistoryStore

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = frozenset({"name", "url", "interval", "is_active"})


class InvalidWebsiteError(ValueError):
    """Raised when website input fails validation."""


def _validate_name(name: Any) -> str:
    if not isinstance(name, str) or not name.strip():
        raise InvalidWebsiteError("Website name is required")
    return name.strip()


def _validate_url(url: Any) -> str:
    if not isinstance(url, str) or not url.strip():
        raise InvalidWebsiteError("Website url is required")
    url = url.strip()
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as e:
        raise InvalidWebsiteError(f"Malformed url: {e}") from e
    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise InvalidWebsiteError(f"Malformed url: {url!r} (expected http or https)")
    return url


def _validate_interval(interval: Any) -> int:
    if isinstance(interval, bool) or not isinstance(interval, int) or interval <= 0:
        raise InvalidWebsiteError("Website interval must be a positive number of milliseconds")
    return interval


def _validate_active(is_active: Any) -> bool:
    if not isinstance(is_active, bool):
        raise InvalidWebsiteError("Website is_active must be a boolean")
    return is_active


_VALIDATORS = {
    "name": _validate_name,
    "url": _validate_url,
    "interval": _validate_interval,
    "is_active": _validate_active,
}


class WebsiteRegistry:
    """CRUD over monitored websites.

    Deleting a website purges its history while the registry lock is held,
    and the scheduler records results through ``record`` under the same
    lock, so no check can outlive its website.
    """

    def __init__(self, history: HistoryStore, default_interval_ms: int = 5000):
        self.history = history
        self.default_interval_ms = default_interval_ms
        self._websites: Dict[str, Website] = {}
        self._lock = threading.Lock()

    def add(
        self,
        name: str,
        url: str,
        interval: Optional[int] = None,
        is_active: bool = True,
    ) -> Website:
        """Register a website. Raises InvalidWebsiteError on bad input."""
        website = Website(
            id=str(uuid.uuid4()),
            name=_validate_name(name),
            url=_validate_url(url),
            interval=_validate_interval(
                interval if interval is not None else self.default_interval_ms
            ),
            is_active=_validate_active(is_active),
        )
        with self._lock:
            self._websites[website.id] = website
            self.history.ensure(website.id)
        logger.info(f"Registered website {website.name} ({website.url})")
        return website

    def load(self, seeds: Iterable[Any]) -> List[Website]:
        """Register the initial websites from configuration.

        Invalid seeds are logged and skipped.
        """
        websites = []
        for seed in seeds:
            try:
                websites.append(self.add(seed.name, seed.url))
            except InvalidWebsiteError as e:
                logger.error(f"Skipping configured website {seed.name!r}: {e}")
        return websites

    def get(self, website_id: str) -> Optional[Website]:
        with self._lock:
            return self._websites.get(website_id)

    def list(self) -> List[Website]:
        """All websites in registration order."""
        with self._lock:
            return list(self._websites.values())

    def list_active(self) -> List[Website]:
        with self._lock:
            return [w for w in self._websites.values() if w.is_active]

    def update(self, website_id: str, changes: Mapping[str, Any]) -> Optional[Website]:
        """Apply a partial update.

        Only fields in UPDATABLE_FIELDS may change. Returns None if the
        website does not exist.
        """
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise InvalidWebsiteError(f"Cannot update fields: {', '.join(sorted(unknown))}")
        validated = {key: _VALIDATORS[key](value) for key, value in changes.items()}

        with self._lock:
            website = self._websites.get(website_id)
            if website is None:
                return None
            website = replace(website, **validated)
            self._websites[website_id] = website
        return website

    def delete(self, website_id: str) -> bool:
        """Remove a website and its history. Returns False if unknown."""
        with self._lock:
            website = self._websites.pop(website_id, None)
            if website is None:
                return False
            self.history.purge(website_id)
        logger.info(f"Deleted website {website.name} ({website.url})")
        return True

    def record(self, website_id: str, result: ProbeResult) -> Optional[UptimeCheck]:
        """Append a probe result if the website still exists."""
        with self._lock:
            website = self._websites.get(website_id)
            if website is None:
                return None
            return self.history.append(website.id, website.name, result)

    def __len__(self) -> int:
        with self._lock:
            return len(self._websites)

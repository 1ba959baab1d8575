"""Checker service - performs a single timed HTTP GET and classifies it."""
import asyncio
import logging
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Optional

import httpx

from ..models import CheckStatus

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_MS = 10000
DEFAULT_THRESHOLD_MS = 5000


@dataclass(frozen=True)
class ProbeResult:
    """Outcome fields produced by one probe, before the store assigns an id."""
    status: CheckStatus
    response_time: int  # milliseconds
    timestamp: str


def classify(response_time: int, threshold_ms: int) -> CheckStatus:
    """Classify a successful probe by latency.

    Strictly above the threshold is slow, anything else is up.
    """
    return "slow" if response_time > threshold_ms else "up"


class CheckerService:
    """Service for probing website availability.

    Only transport-level errors count as down. Any HTTP response, including
    4xx and 5xx, means the site answered and is classified by latency alone.
    """

    def __init__(
        self,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        threshold_ms: int = DEFAULT_THRESHOLD_MS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.timeout_ms = timeout_ms
        self.threshold_ms = threshold_ms
        self._transport = transport
        self._clock = clock

    def _elapsed_ms(self, start: float) -> int:
        return max(0, int(round((self._clock() - start) * 1000)))

    async def _fetch(self, url: str, timeout_ms: int) -> None:
        async with httpx.AsyncClient(
            timeout=timeout_ms / 1000,
            follow_redirects=True,
            transport=self._transport,
        ) as client:
            await client.get(url)

    async def probe(
        self,
        url: str,
        timeout_ms: Optional[int] = None,
        threshold_ms: Optional[int] = None,
    ) -> ProbeResult:
        """Probe a URL once. Never raises; failures come back as down."""
        timeout_ms = timeout_ms if timeout_ms is not None else self.timeout_ms
        threshold_ms = threshold_ms if threshold_ms is not None else self.threshold_ms

        start = self._clock()
        try:
            # Overall deadline; httpx timeouts are per step and reset on redirects
            await asyncio.wait_for(self._fetch(url, timeout_ms), timeout=timeout_ms / 1000)

            response_time = self._elapsed_ms(start)
            status = classify(response_time, threshold_ms)

        except (asyncio.TimeoutError, httpx.TimeoutException):
            response_time = self._elapsed_ms(start)
            status = "down"
            logger.debug(f"Probe timeout for {url} after {response_time}ms")
        except httpx.HTTPError as e:
            response_time = self._elapsed_ms(start)
            status = "down"
            logger.debug(f"Probe error for {url}: {e}")
        except Exception as e:
            response_time = self._elapsed_ms(start)
            status = "down"
            logger.warning(f"Unexpected probe failure for {url}: {e!r}")

        return ProbeResult(
            status=status,
            response_time=response_time,
            timestamp=datetime.now(timezone.utc).isoformat(),
        )

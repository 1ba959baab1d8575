"""SecurityScorecard passthrough client."""
import logging
from typing import Any, Optional

import httpx

logger = logging.getLogger(__name__)


class UpstreamUnavailableError(Exception):
    """Raised when the SecurityScorecard API cannot be reached or answers badly."""


class ScorecardClient:
    """Fetches history events from SecurityScorecard and returns them as-is."""

    def __init__(
        self,
        url: str,
        token: Optional[str],
        timeout_ms: int = 10000,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = url
        self.token = token
        self.timeout_ms = timeout_ms
        self._transport = transport

    async def fetch_events(self) -> Any:
        """Return the decoded upstream JSON payload."""
        if not self.token:
            raise UpstreamUnavailableError("SCORECARD_TOKEN not configured")

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_ms / 1000,
                transport=self._transport,
            ) as client:
                response = await client.get(
                    self.url,
                    headers={"Authorization": f"Token {self.token}"},
                )
                response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as e:
            raise UpstreamUnavailableError(
                f"SecurityScorecard returned HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise UpstreamUnavailableError(f"SecurityScorecard request failed: {e}") from e
        except ValueError as e:
            raise UpstreamUnavailableError("SecurityScorecard returned invalid JSON") from e

"""Pydantic schemas for API request/response models."""
from .website import (
    WebsiteCreate,
    WebsiteUpdate,
    WebsiteResponse,
    DeleteResponse,
)
from .uptime import (
    FeedEntry,
    CheckResponse,
    LastCheck,
    UptimeStatsResponse,
)

__all__ = [
    "WebsiteCreate",
    "WebsiteUpdate",
    "WebsiteResponse",
    "DeleteResponse",
    "FeedEntry",
    "CheckResponse",
    "LastCheck",
    "UptimeStatsResponse",
]

"""In-memory domain models."""
from .website import Website
from .uptime_check import UptimeCheck, CheckStatus

__all__ = ["Website", "UptimeCheck", "CheckStatus"]

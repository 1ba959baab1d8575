"""Uptime Monitor - periodic HTTP checks with a dashboard API."""

__version__ = "1.0.0"

"""API routers."""
from .uptime import router as uptime_router
from .websites import router as websites_router
from .scorecard import router as scorecard_router

__all__ = ["uptime_router", "websites_router", "scorecard_router"]

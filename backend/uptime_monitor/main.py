"""Main FastAPI application."""
import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings, settings as default_settings
from .routers import scorecard_router, uptime_router, websites_router
from .state import build_state

# Configure logging
logging.basicConfig(
    level=default_settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - seed websites, run the poll loop, stop it on shutdown."""
    state = app.state.monitor
    config = state.settings

    if config.websites and not len(state.registry):
        state.registry.load(config.websites)

    logger.info(f"Server running on port {config.port}")
    logger.info(f"Check interval: {config.check_interval_ms}ms")
    logger.info(f"Response threshold: {config.response_threshold_ms}ms")
    names = ", ".join(w.name for w in state.registry.list()) or "(none)"
    logger.info(f"Monitoring websites: {names}")

    state.scheduler.start()

    yield

    # Shutdown
    state.scheduler.stop()
    logger.info("Shutdown complete")


def create_app(
    config: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    ``transport`` replaces the network for probes, which tests use to
    simulate websites.
    """
    config = config or default_settings

    app = FastAPI(
        title="Uptime Monitor",
        description="Periodic HTTP uptime checks with bounded in-memory history",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.monitor = build_state(config, transport=transport)

    # CORS middleware for the dashboard
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(uptime_router)
    app.include_router(websites_router)
    app.include_router(scorecard_router)

    @app.get("/health")
    async def health_check():
        state = app.state.monitor
        return {
            "status": "healthy",
            "scheduler": state.scheduler.is_running,
            "websites": len(state.registry),
        }

    return app


# Create the application instance
app = create_app()


def run():
    """Console entry point."""
    import uvicorn

    uvicorn.run(app, host=default_settings.host, port=default_settings.port)


if __name__ == "__main__":
    run()

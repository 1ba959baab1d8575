"""Scheduler service - runs the periodic website poll.

One interval job probes every active website per tick:
- The registry is snapshotted at the start of a tick, so added or removed
  websites take effect on the next tick
- Probes fan out concurrently, bounded by MAX_CONCURRENT_CHECKS
- max_instances=1 with coalescing means an overrunning tick makes the
  scheduler skip fires rather than start a second tick
- A failing website is logged and never stops the rest of the tick
"""
import asyncio
import logging
from typing import List, Optional

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from ..models import UptimeCheck, Website
from .checker import CheckerService
from .registry import WebsiteRegistry

logger = logging.getLogger(__name__)

# Maximum concurrent probes per tick
MAX_CONCURRENT_CHECKS = 10

DEFAULT_INTERVAL_MS = 5000

JOB_ID = "run_checks"


class SchedulerService:
    """Service for polling all registered websites on a fixed interval."""

    def __init__(
        self,
        registry: WebsiteRegistry,
        checker: CheckerService,
        interval_ms: int = DEFAULT_INTERVAL_MS,
        max_concurrent_checks: int = MAX_CONCURRENT_CHECKS,
    ):
        self.registry = registry
        self.checker = checker
        self.interval_ms = interval_ms
        self.max_concurrent_checks = max_concurrent_checks
        self.scheduler: Optional[AsyncIOScheduler] = None
        self._running = False

    @property
    def is_running(self) -> bool:
        return self._running

    def start(self):
        """Start the scheduler. Must be called with a running event loop."""
        if self._running:
            return

        self.scheduler = AsyncIOScheduler()
        self.scheduler.add_job(
            self.run_checks,
            trigger=IntervalTrigger(seconds=self.interval_ms / 1000),
            id=JOB_ID,
            replace_existing=True,
            max_instances=1,
            coalesce=True,
            misfire_grace_time=max(1, self.interval_ms // 1000),
        )
        self.scheduler.start()
        self._running = True
        logger.info(
            f"Scheduler started (interval={self.interval_ms}ms, "
            f"max_concurrent={self.max_concurrent_checks})"
        )

    def stop(self):
        """Stop the scheduler.

        In-flight probes are not awaited; each one records independently and
        a probe for a deleted website is discarded.
        """
        if self.scheduler and self._running:
            self.scheduler.shutdown(wait=False)
            self._running = False
            logger.info("Scheduler stopped")

    async def run_checks(self) -> List[UptimeCheck]:
        """Run one tick: probe every active website and record the results."""
        try:
            websites = self.registry.list_active()
            if not websites:
                return []

            logger.debug(f"Checking {len(websites)} websites")

            semaphore = asyncio.Semaphore(self.max_concurrent_checks)

            async def check_with_limit(website: Website) -> Optional[UptimeCheck]:
                async with semaphore:
                    return await self._check_website(website)

            results = await asyncio.gather(*[check_with_limit(w) for w in websites])
            return [check for check in results if check is not None]

        except Exception as e:
            logger.error(f"Error running checks: {e}")
            return []

    async def _check_website(self, website: Website) -> Optional[UptimeCheck]:
        """Probe one website and record the outcome."""
        try:
            result = await self.checker.probe(website.url)
            check = self.registry.record(website.id, result)
            if check is None:
                logger.debug(f"Website {website.id} removed during probe, result dropped")
                return None
            logger.debug(f"Website {website.name}: {check.status} ({check.response_time}ms)")
            return check
        except Exception as e:
            logger.error(f"Error checking website {website.name}: {e}")
            return None

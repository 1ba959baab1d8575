from __future__ import annotations

import asyncio

import pytest

from uptime_monitor.services.checker import ProbeResult
from uptime_monitor.services.scheduler import JOB_ID, SchedulerService


@pytest.fixture
def scheduler(registry, checker) -> SchedulerService:
    service = SchedulerService(registry, checker, interval_ms=5000, max_concurrent_checks=4)
    yield service
    service.stop()


@pytest.mark.asyncio
async def test_tick_probes_every_active_website(scheduler, registry, history, hosts, respond, fail) -> None:
    up = registry.add("Up", "https://up.example")
    down = registry.add("Down", "https://down.example")
    paused = registry.add("Paused", "https://paused.example", is_active=False)
    hosts.handlers["up.example"] = respond(100)
    hosts.handlers["down.example"] = fail(30)

    checks = await scheduler.run_checks()

    assert len(checks) == 2
    assert [c.status for c in history.recent(up.id)] == ["up"]
    assert [c.status for c in history.recent(down.id)] == ["down"]
    assert history.recent(paused.id) == []
    assert "paused.example" not in hosts.calls


@pytest.mark.asyncio
async def test_tick_with_no_websites_is_noop(scheduler, hosts) -> None:
    assert await scheduler.run_checks() == []
    assert hosts.calls == []


@pytest.mark.asyncio
async def test_failing_website_does_not_abort_tick(registry, history, checker, hosts, respond) -> None:
    bad = registry.add("Bad", "https://bad.example")
    good = registry.add("Good", "https://good.example")
    hosts.handlers["good.example"] = respond(10)

    original_probe = checker.probe

    async def flaky_probe(url, *args, **kwargs):
        if "bad.example" in url:
            raise RuntimeError("boom")
        return await original_probe(url, *args, **kwargs)

    checker.probe = flaky_probe
    scheduler = SchedulerService(registry, checker)

    checks = await scheduler.run_checks()

    assert [c.website_id for c in checks] == [good.id]
    assert history.recent(bad.id) == []
    assert len(history.recent(good.id)) == 1


@pytest.mark.asyncio
async def test_registry_changes_apply_on_next_tick(scheduler, registry, history, hosts, respond) -> None:
    first = registry.add("First", "https://first.example")
    hosts.handlers["first.example"] = respond(10)
    hosts.handlers["second.example"] = respond(10)

    await scheduler.run_checks()
    second = registry.add("Second", "https://second.example")
    registry.delete(first.id)
    await scheduler.run_checks()

    assert history.recent(first.id) == []
    assert len(history.recent(second.id)) == 1


@pytest.mark.asyncio
async def test_website_deleted_mid_probe_leaves_no_history(registry, history, checker, hosts) -> None:
    website = registry.add("Gone", "https://gone.example")
    original_probe = checker.probe

    async def probe_then_delete(url, *args, **kwargs):
        result = await original_probe(url, *args, **kwargs)
        registry.delete(website.id)
        return result

    checker.probe = probe_then_delete
    scheduler = SchedulerService(registry, checker)

    assert await scheduler.run_checks() == []
    assert history.recent(website.id) == []
    assert history.combined() == []


@pytest.mark.asyncio
async def test_fan_out_is_bounded(registry, checker) -> None:
    in_flight = 0
    peak = 0

    async def slow_probe(url, *args, **kwargs):
        nonlocal in_flight, peak
        in_flight += 1
        peak = max(peak, in_flight)
        await asyncio.sleep(0.01)
        in_flight -= 1
        return ProbeResult(status="up", response_time=10, timestamp="2026-01-01T00:00:00+00:00")

    for i in range(6):
        registry.add(f"Site {i}", f"https://site{i}.example")
    checker.probe = slow_probe
    scheduler = SchedulerService(registry, checker, max_concurrent_checks=2)

    checks = await scheduler.run_checks()

    assert len(checks) == 6
    assert peak == 2


@pytest.mark.asyncio
async def test_start_and_stop(scheduler) -> None:
    assert scheduler.is_running is False

    scheduler.start()
    scheduler.start()

    assert scheduler.is_running is True
    job = scheduler.scheduler.get_job(JOB_ID)
    assert job is not None
    assert job.max_instances == 1
    assert job.coalesce is True

    scheduler.stop()
    scheduler.stop()

    assert scheduler.is_running is False


def test_stop_before_start_is_noop(registry, checker) -> None:
    SchedulerService(registry, checker).stop()

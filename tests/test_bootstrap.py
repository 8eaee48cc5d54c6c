"""Regression tests for bootstrap wiring of the status reporter."""

from __future__ import annotations

from datetime import datetime

from app.bootstrap import bootstrap_create_status_reporter
from app.config import AppSettings
from app.domain import MemoryCounters, PlatformInfo


class _FixedClock:
    """Clock stub satisfying the clock port."""

    def clock_now(self) -> datetime:
        return datetime(2026, 10, 17, 9, 30, 0)


class _MetricsStub:
    """Runtime metrics stub satisfying the metrics port."""

    def runtime_uptime_millis(self) -> int:
        return 3_660_000

    def runtime_memory_counters(self) -> MemoryCounters:
        return MemoryCounters(total_bytes=4 * 1024**3, free_bytes=1024**3)

    def runtime_platform_info(self) -> PlatformInfo:
        return PlatformInfo("3.12.0", "CPython", 2, "Linux", "6.0", "x86_64")


def test_bootstrap_status_reporter_accepts_port_implementations() -> None:
    """Wire any clock and metrics port implementation into the reporter.

    Returns:
        None: Assertions validate the injected sources are used.

    Raises:
        AssertionError: Raised when the reporter ignores injected sources.
    """

    settings = AppSettings(
        application_name="infoline-api",
        app_version="3.1.0",
        environment_name="test",
        application_description="bootstrap test",
    )

    reporter = bootstrap_create_status_reporter(settings, metrics_source=_MetricsStub(), clock=_FixedClock())
    snapshot = reporter.status_reporter_snapshot()

    assert reporter.metadata.description == "bootstrap test"
    assert snapshot.uptime == "1 hours, 1 minutes"
    assert snapshot.memory_used == "3.0 GB"
    assert snapshot.to_payload()["timestamp"] == "2026-10-17T09:30:00"

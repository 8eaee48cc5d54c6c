"""Regression tests for status snapshot assembly."""

from __future__ import annotations

from datetime import datetime

import pytest

from app.domain import AppMetadata, MemoryCounters, PlatformInfo
from app.status import InvalidArgumentError, StatusReporter, status_build_snapshot

_GIB = 1024**3


class _FixedClock:
    """Clock stub returning one frozen instant."""

    def __init__(self, moment: datetime) -> None:
        self._moment = moment

    def clock_now(self) -> datetime:
        return self._moment


class _MetricsStub:
    """Runtime metrics stub returning fixed counters."""

    def __init__(self, uptime_millis: int, total_bytes: int, free_bytes: int) -> None:
        self._uptime_millis = uptime_millis
        self._memory_counters = MemoryCounters(total_bytes=total_bytes, free_bytes=free_bytes)

    def runtime_uptime_millis(self) -> int:
        return self._uptime_millis

    def runtime_memory_counters(self) -> MemoryCounters:
        return self._memory_counters

    def runtime_platform_info(self) -> PlatformInfo:
        return PlatformInfo("3.12.0", "CPython", 4, "Linux", "6.0", "x86_64")


def _build_metadata() -> AppMetadata:
    return AppMetadata(application_name="infoline-api", version="1.2.3", environment_name="test")


def test_status_build_snapshot_formats_counters_and_stamps_clock() -> None:
    """Format uptime and memory counters and stamp the injected clock time.

    Returns:
        None: Assertions validate snapshot fields.

    Raises:
        AssertionError: Raised when snapshot fields do not match expected values.
    """

    clock = _FixedClock(datetime(2026, 10, 17, 9, 30, 0))

    snapshot = status_build_snapshot(
        metadata=_build_metadata(),
        uptime_millis=3_660_000,
        memory_total_bytes=8 * _GIB,
        memory_free_bytes=2 * _GIB,
        clock=clock,
    )

    assert snapshot.to_payload() == {
        "applicationName": "infoline-api",
        "version": "1.2.3",
        "environment": "test",
        "timestamp": "2026-10-17T09:30:00",
        "uptime": "1 hours, 1 minutes",
        "memoryTotal": "8.0 GB",
        "memoryFree": "2.0 GB",
        "memoryUsed": "6.0 GB",
    }


def test_status_build_snapshot_computes_used_memory_on_raw_bytes() -> None:
    """Subtract raw byte counts before formatting used memory."""

    snapshot = status_build_snapshot(
        metadata=_build_metadata(),
        uptime_millis=0,
        memory_total_bytes=1_600,
        memory_free_bytes=1_100,
        clock=_FixedClock(datetime(2026, 1, 1)),
    )

    assert snapshot.memory_total == "1.6 KB"
    assert snapshot.memory_free == "1.1 KB"
    assert snapshot.memory_used == "500 B"


def test_status_build_snapshot_is_deterministic_with_frozen_clock() -> None:
    """Produce equal snapshots for identical inputs and a frozen clock."""

    clock = _FixedClock(datetime(2026, 10, 17, 9, 30, 0, 125000))
    arguments = {
        "metadata": _build_metadata(),
        "uptime_millis": 90_000_000,
        "memory_total_bytes": 4 * _GIB,
        "memory_free_bytes": _GIB,
        "clock": clock,
    }

    assert status_build_snapshot(**arguments) == status_build_snapshot(**arguments)


@pytest.mark.parametrize(
    ("memory_total_bytes", "memory_free_bytes"),
    [(0, 1), (1_024, 1_025), (_GIB, 2 * _GIB)],
)
def test_status_build_snapshot_rejects_free_memory_above_total(memory_total_bytes: int, memory_free_bytes: int) -> None:
    """Reject free memory larger than total memory."""

    with pytest.raises(InvalidArgumentError) as error_info:
        status_build_snapshot(
            metadata=_build_metadata(),
            uptime_millis=0,
            memory_total_bytes=memory_total_bytes,
            memory_free_bytes=memory_free_bytes,
            clock=_FixedClock(datetime(2026, 1, 1)),
        )

    assert error_info.value.argument_name == "memory_free_bytes"


def test_status_build_snapshot_rejects_negative_uptime() -> None:
    """Reject negative uptime during snapshot assembly."""

    with pytest.raises(InvalidArgumentError):
        status_build_snapshot(
            metadata=_build_metadata(),
            uptime_millis=-5,
            memory_total_bytes=_GIB,
            memory_free_bytes=0,
            clock=_FixedClock(datetime(2026, 1, 1)),
        )


def test_status_reporter_samples_metrics_source() -> None:
    """Sample uptime and memory from the metrics port for each snapshot."""

    reporter = StatusReporter(
        metadata=_build_metadata(),
        metrics_source=_MetricsStub(uptime_millis=90_000, total_bytes=2 * _GIB, free_bytes=_GIB),
        clock=_FixedClock(datetime(2026, 10, 17, 9, 30, 0)),
    )

    snapshot = reporter.status_reporter_snapshot()

    assert snapshot.uptime == "1 minutes, 30 seconds"
    assert snapshot.memory_used == "1.0 GB"
    assert reporter.status_reporter_timestamp() == "2026-10-17T09:30:00"


def test_status_reporter_propagates_invalid_counters() -> None:
    """Surface inconsistent sampled counters as InvalidArgumentError."""

    reporter = StatusReporter(
        metadata=_build_metadata(),
        metrics_source=_MetricsStub(uptime_millis=0, total_bytes=_GIB, free_bytes=2 * _GIB),
        clock=_FixedClock(datetime(2026, 1, 1)),
    )

    with pytest.raises(InvalidArgumentError):
        reporter.status_reporter_snapshot()


def test_status_reporter_requires_dependencies() -> None:
    """Reject missing reporter dependencies at construction."""

    with pytest.raises(ValueError):
        StatusReporter(metadata=_build_metadata(), metrics_source=None, clock=_FixedClock(datetime(2026, 1, 1)))


def test_status_reporter_exposes_metadata() -> None:
    """Expose the metadata used to stamp snapshots."""

    metadata = _build_metadata()
    reporter = StatusReporter(
        metadata=metadata,
        metrics_source=_MetricsStub(uptime_millis=0, total_bytes=_GIB, free_bytes=0),
        clock=_FixedClock(datetime(2026, 1, 1)),
    )

    assert reporter.metadata is metadata

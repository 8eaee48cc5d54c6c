"""Typed interfaces for runtime counter sources."""

from datetime import datetime
from typing import Protocol

from app.domain import MemoryCounters, PlatformInfo


class ClockPort(Protocol):
    """Port definition for reading the current wall-clock time."""

    def clock_now(self) -> datetime:
        """Return the current naive local time.

        Returns:
            datetime: Naive local datetime.
        """


class RuntimeMetricsPort(Protocol):
    """Port definition for process and host runtime counters."""

    def runtime_uptime_millis(self) -> int:
        """Return elapsed process lifetime in milliseconds.

        Returns:
            int: Non-negative uptime in milliseconds.

        Raises:
            RuntimeError: Raised when process metadata is unavailable.
        """

    def runtime_memory_counters(self) -> MemoryCounters:
        """Sample total and free memory in one read.

        Returns:
            MemoryCounters: Raw memory counters in bytes.

        Raises:
            RuntimeError: Raised when memory counters are unavailable.
        """

    def runtime_platform_info(self) -> PlatformInfo:
        """Return interpreter and operating system metadata.

        Returns:
            PlatformInfo: Static platform details.
        """

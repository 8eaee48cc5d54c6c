"""Runtime counter sources backed by the wall clock and psutil."""

from __future__ import annotations

import os
import platform
import time
from datetime import datetime

import psutil

from app.domain import MemoryCounters, PlatformInfo

from .interfaces import ClockPort, RuntimeMetricsPort


class SystemClock(ClockPort):
    """Clock reading naive local time from the host."""

    def clock_now(self) -> datetime:
        return datetime.now()


class PsutilRuntimeMetricsService(RuntimeMetricsPort):
    """Runtime metrics service reading the current process and host memory via psutil."""

    def __init__(self, process: psutil.Process | None = None):
        """Initialize runtime metrics service.

        Args:
            process: Optional process handle, defaults to the current process.
        """

        self._process = process or psutil.Process(os.getpid())

    def runtime_uptime_millis(self) -> int:
        """Return elapsed time since the process was created.

        Returns:
            int: Non-negative uptime in milliseconds.

        Raises:
            RuntimeError: Raised when the process creation time cannot be read.
        """

        try:
            created_at_epoch = self._process.create_time()
        except psutil.Error as error:
            raise RuntimeError("process creation time is unavailable") from error
        return max(0, int((time.time() - created_at_epoch) * 1000))

    def runtime_memory_counters(self) -> MemoryCounters:
        """Sample host memory totals in one psutil call.

        Returns:
            MemoryCounters: Total and available memory in bytes.
        """

        virtual_memory = psutil.virtual_memory()
        return MemoryCounters(
            total_bytes=int(virtual_memory.total),
            free_bytes=int(virtual_memory.available),
        )

    def runtime_platform_info(self) -> PlatformInfo:
        """Return interpreter and operating system metadata.

        Returns:
            PlatformInfo: Static platform details.
        """

        return PlatformInfo(
            python_version=platform.python_version(),
            python_implementation=platform.python_implementation(),
            processors=os.cpu_count() or 1,
            os_name=platform.system(),
            os_version=platform.release(),
            os_arch=platform.machine(),
        )

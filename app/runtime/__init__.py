"""Runtime layer package for clock, process metrics, and request counters."""

from .interfaces import ClockPort, RuntimeMetricsPort
from .process_metrics import PsutilRuntimeMetricsService, SystemClock
from .request_statistics import RequestStatisticsTracker

__all__ = [
    "ClockPort",
    "RuntimeMetricsPort",
    "PsutilRuntimeMetricsService",
    "SystemClock",
    "RequestStatisticsTracker",
]

"""Domain models used across application layer boundaries."""

from .models import AppMetadata, MemoryCounters, PlatformInfo, RequestStatistics, StatusSnapshot
from .timeline import domain_format_local_timestamp, domain_format_utc_timestamp

__all__ = [
    "AppMetadata",
    "MemoryCounters",
    "PlatformInfo",
    "RequestStatistics",
    "StatusSnapshot",
    "domain_format_local_timestamp",
    "domain_format_utc_timestamp",
]

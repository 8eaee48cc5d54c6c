"""Typed domain models shared across runtime layers.

This module provides simple data contracts for cross-layer communication
between runtime counter sources, the status reporter, and API routers.
"""

from dataclasses import dataclass
from datetime import datetime

from .timeline import domain_format_local_timestamp


@dataclass(frozen=True)
class AppMetadata:
    """Static application metadata for runtime identification.

    Attributes:
        application_name: Human-readable app name.
        version: Deployed application version label.
        environment_name: Runtime environment label.
        description: Human-readable application description.
    """

    application_name: str
    version: str
    environment_name: str
    description: str = ""


@dataclass(frozen=True)
class MemoryCounters:
    """Raw memory counters sampled together at one instant.

    Attributes:
        total_bytes: Total memory in bytes.
        free_bytes: Free memory in bytes.
    """

    total_bytes: int
    free_bytes: int


@dataclass(frozen=True)
class PlatformInfo:
    """Interpreter and operating system metadata.

    Attributes:
        python_version: Interpreter version string.
        python_implementation: Interpreter implementation name.
        processors: Logical processor count.
        os_name: Operating system name.
        os_version: Operating system release.
        os_arch: Machine architecture.
    """

    python_version: str
    python_implementation: str
    processors: int
    os_name: str
    os_version: str
    os_arch: str


@dataclass(frozen=True)
class StatusSnapshot:
    """Immutable human-readable status payload for one request.

    Attributes:
        application_name: Service name from configuration.
        version: Application version from configuration.
        environment: Environment label from configuration.
        timestamp: Naive local capture time.
        uptime: Formatted process uptime.
        memory_total: Formatted total memory.
        memory_free: Formatted free memory.
        memory_used: Formatted used memory, computed on raw bytes.
    """

    application_name: str
    version: str
    environment: str
    timestamp: datetime
    uptime: str
    memory_total: str
    memory_free: str
    memory_used: str

    def to_payload(self) -> dict[str, str]:
        """Render the snapshot with JSON field names.

        Returns:
            dict[str, str]: JSON-serializable snapshot payload.
        """

        return {
            "applicationName": self.application_name,
            "version": self.version,
            "environment": self.environment,
            "timestamp": domain_format_local_timestamp(self.timestamp),
            "uptime": self.uptime,
            "memoryTotal": self.memory_total,
            "memoryFree": self.memory_free,
            "memoryUsed": self.memory_used,
        }


@dataclass(frozen=True)
class RequestStatistics:
    """Point-in-time HTTP request counters.

    Attributes:
        total_requests: Completed and in-flight requests seen since start.
        active_connections: Requests currently being handled.
        started_at: Naive local time the application was assembled.
    """

    total_requests: int
    active_connections: int
    started_at: datetime

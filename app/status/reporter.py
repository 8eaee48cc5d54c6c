"""Status snapshot assembly from raw runtime counters."""

from __future__ import annotations

import logging

from app.domain import AppMetadata, StatusSnapshot, domain_format_local_timestamp
from app.runtime import ClockPort, RuntimeMetricsPort

from .errors import InvalidArgumentError
from .formatting import status_format_bytes, status_format_uptime

logger = logging.getLogger(__name__)


def status_build_snapshot(
    metadata: AppMetadata,
    uptime_millis: int,
    memory_total_bytes: int,
    memory_free_bytes: int,
    clock: ClockPort,
) -> StatusSnapshot:
    """Build one immutable status snapshot from raw counters.

    Used memory is computed on raw bytes before formatting.

    Args:
        metadata: Application name, version, and environment.
        uptime_millis: Process uptime in milliseconds.
        memory_total_bytes: Total memory in bytes.
        memory_free_bytes: Free memory in bytes.
        clock: Clock stamping the snapshot time.

    Returns:
        StatusSnapshot: Formatted snapshot.

    Raises:
        InvalidArgumentError: Raised when counters are negative, too large, or free exceeds total.
    """

    memory_total = status_format_bytes(memory_total_bytes)
    memory_free = status_format_bytes(memory_free_bytes)
    if memory_free_bytes > memory_total_bytes:
        raise InvalidArgumentError(
            f"memory_free_bytes ({memory_free_bytes}) must not exceed memory_total_bytes ({memory_total_bytes})",
            "memory_free_bytes",
        )

    return StatusSnapshot(
        application_name=metadata.application_name,
        version=metadata.version,
        environment=metadata.environment_name,
        timestamp=clock.clock_now(),
        uptime=status_format_uptime(uptime_millis),
        memory_total=memory_total,
        memory_free=memory_free,
        memory_used=status_format_bytes(memory_total_bytes - memory_free_bytes),
    )


class StatusReporter:
    """Produce status snapshots by sampling injected runtime sources."""

    def __init__(self, metadata: AppMetadata, metrics_source: RuntimeMetricsPort, clock: ClockPort):
        """Initialize status reporter.

        Args:
            metadata: Static application metadata.
            metrics_source: Runtime counter source.
            clock: Wall-clock source.

        Raises:
            ValueError: Raised when any dependency is None.
        """

        if metadata is None:
            raise ValueError("metadata must not be None")
        if metrics_source is None:
            raise ValueError("metrics_source must not be None")
        if clock is None:
            raise ValueError("clock must not be None")
        self._metadata = metadata
        self._metrics_source = metrics_source
        self._clock = clock

    @property
    def metadata(self) -> AppMetadata:
        """Return the static application metadata stamped on every snapshot.

        Returns:
            AppMetadata: Name, version, environment, and description.

        Raises:
            RuntimeError: This property does not raise runtime errors.
        """

        return self._metadata

    def status_reporter_snapshot(self) -> StatusSnapshot:
        """Sample uptime and memory counters and build one snapshot.

        Returns:
            StatusSnapshot: Formatted snapshot for the current instant.

        Raises:
            InvalidArgumentError: Raised when sampled counters violate snapshot preconditions.
        """

        memory_counters = self._metrics_source.runtime_memory_counters()
        uptime_millis = self._metrics_source.runtime_uptime_millis()
        try:
            return status_build_snapshot(
                metadata=self._metadata,
                uptime_millis=uptime_millis,
                memory_total_bytes=memory_counters.total_bytes,
                memory_free_bytes=memory_counters.free_bytes,
                clock=self._clock,
            )
        except InvalidArgumentError:
            logger.error(
                "Rejected runtime counters: uptime_millis=%s total_bytes=%s free_bytes=%s",
                uptime_millis,
                memory_counters.total_bytes,
                memory_counters.free_bytes,
            )
            raise

    def status_reporter_timestamp(self) -> str:
        """Return the current clock time as an ISO-8601 local timestamp.

        Returns:
            str: Timestamp without offset.
        """

        return domain_format_local_timestamp(self._clock.clock_now())

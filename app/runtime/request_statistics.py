"""Thread-safe HTTP request counters shared by middleware and status routes."""

from __future__ import annotations

import threading
from datetime import datetime

from app.domain import RequestStatistics


class RequestStatisticsTracker:
    """Count total and in-flight requests since application start."""

    def __init__(self, started_at: datetime):
        if started_at is None:
            raise ValueError("started_at must not be None")
        self._started_at = started_at
        self._lock = threading.Lock()
        self._total_requests = 0
        self._active_connections = 0

    def stats_request_started(self) -> None:
        """Record one request entering the application.

        Returns:
            None: Counters are updated in place.

        Raises:
            RuntimeError: This method does not raise runtime errors.
        """

        with self._lock:
            self._total_requests += 1
            self._active_connections += 1

    def stats_request_finished(self) -> None:
        """Record one request leaving the application.

        Unmatched finish notifications leave the active count at zero.

        Returns:
            None: Counters are updated in place.

        Raises:
            RuntimeError: This method does not raise runtime errors.
        """

        with self._lock:
            if self._active_connections > 0:
                self._active_connections -= 1

    def stats_snapshot(self) -> RequestStatistics:
        """Return a consistent copy of the current counters.

        Returns:
            RequestStatistics: Counters and application start time.
        """

        with self._lock:
            return RequestStatistics(
                total_requests=self._total_requests,
                active_connections=self._active_connections,
                started_at=self._started_at,
            )

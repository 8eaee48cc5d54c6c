"""Combined status endpoint router with uptime and request statistics."""

from fastapi import APIRouter

from app.domain import domain_format_local_timestamp
from app.runtime import RequestStatisticsTracker
from app.status import StatusReporter


def api_create_status_router(reporter: StatusReporter, statistics_tracker: RequestStatisticsTracker) -> APIRouter:
    """Create status router combining health and runtime information.

    Args:
        reporter: Status reporter producing snapshots.
        statistics_tracker: HTTP request counters.

    Returns:
        APIRouter: Router exposing `/status` endpoint.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if reporter is None:
        raise ValueError("reporter must not be None")
    if statistics_tracker is None:
        raise ValueError("statistics_tracker must not be None")

    router = APIRouter(tags=["status"])

    @router.get("/status")
    def api_status_overview() -> dict[str, object]:
        """Return running status, formatted uptime, and request counters.

        Returns:
            dict[str, object]: Status payload.

        Raises:
            InvalidArgumentError: Raised when sampled runtime counters are inconsistent.
        """

        snapshot_payload = reporter.status_reporter_snapshot().to_payload()
        statistics = statistics_tracker.stats_snapshot()
        return {
            "status": "RUNNING",
            "uptime": snapshot_payload["uptime"],
            "application": snapshot_payload["applicationName"],
            "version": snapshot_payload["version"],
            "environment": snapshot_payload["environment"],
            "timestamp": snapshot_payload["timestamp"],
            "stats": {
                "totalRequests": statistics.total_requests,
                "activeConnections": statistics.active_connections,
                "lastDeployment": domain_format_local_timestamp(statistics.started_at),
            },
        }

    return router

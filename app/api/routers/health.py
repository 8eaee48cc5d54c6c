"""Health endpoint router composition for liveness and readiness probes."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from app.status import StatusReporter


def api_create_health_router(reporter: StatusReporter) -> APIRouter:
    """Create health-check router for container and orchestrator probes.

    Args:
        reporter: Status reporter providing application metadata and clock.

    Returns:
        APIRouter: Router exposing `/health` endpoint.

    Raises:
        ValueError: Raised when reporter is invalid.
    """

    if reporter is None:
        raise ValueError("reporter must not be None")

    router = APIRouter(tags=["health"])

    @router.get("/health")
    def api_health_status() -> JSONResponse:
        """Return application health state.

        Returns:
            JSONResponse: Deterministic health payload for operational checks.
        """

        payload = {
            "status": "UP",
            "application": reporter.metadata.application_name,
            "timestamp": reporter.status_reporter_timestamp(),
            "checks": {"api": "UP"},
        }
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    return router

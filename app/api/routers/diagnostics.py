"""Debug endpoint router for monitoring and latency drills.

These routes are mounted only outside production environments unless the
`DEBUG_ENDPOINTS_ENABLED` setting says otherwise.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from fastapi import APIRouter, Query, status
from fastapi.responses import JSONResponse

from app.config import AppSettings
from app.status import StatusReporter

logger = logging.getLogger(__name__)


def api_create_diagnostics_router(
    settings: AppSettings,
    reporter: StatusReporter,
    sleep_function: Callable[[float], None] | None = None,
) -> APIRouter:
    """Create debug router exposing forced-error and forced-latency endpoints.

    Args:
        settings: Runtime settings with slow endpoint delay bounds.
        reporter: Status reporter providing the clock.
        sleep_function: Optional blocking sleep in seconds, defaults to `time.sleep`.

    Returns:
        APIRouter: Router exposing `/test/error` and `/test/slow` endpoints.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if settings is None:
        raise ValueError("settings must not be None")
    if reporter is None:
        raise ValueError("reporter must not be None")
    resolved_sleep = sleep_function or time.sleep

    router = APIRouter(prefix="/test", tags=["diagnostics"])

    @router.get("/error")
    def api_diagnostics_error() -> JSONResponse:
        """Return a fixed HTTP 500 payload to exercise error monitoring.

        Returns:
            JSONResponse: Error payload with status code 500.
        """

        logger.warning("Test error endpoint triggered")
        payload = {
            "error": "Test error endpoint",
            "message": "Ceci est une erreur de test pour vérifier le monitoring",
            "timestamp": reporter.status_reporter_timestamp(),
        }
        return JSONResponse(content=payload, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    # Sync handler: FastAPI runs it in the threadpool so the blocking sleep
    # does not stall the event loop.
    @router.get("/slow")
    def api_diagnostics_slow(
        delay: int = Query(
            default=settings.debug_slow_default_delay_ms,
            ge=0,
            le=settings.debug_slow_max_delay_ms,
        ),
    ) -> dict[str, object]:
        """Block for the requested delay and respond.

        Args:
            delay: Delay in milliseconds.

        Returns:
            dict[str, object]: Response payload echoing the applied delay.
        """

        logger.info("Slow endpoint sleeping for %sms", delay)
        resolved_sleep(delay / 1000)
        return {
            "message": f"Réponse après délai de {delay}ms",
            "delay": f"{delay}ms",
            "timestamp": reporter.status_reporter_timestamp(),
        }

    return router

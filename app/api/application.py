"""FastAPI application factory for the InfoLine status API.

This module defines API application composition: versioned routers, request
statistics middleware, and error mapping for invalid runtime counters.
"""

import logging
from collections.abc import Callable

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.config import AppSettings
from app.runtime import RequestStatisticsTracker, RuntimeMetricsPort
from app.status import InvalidArgumentError, StatusReporter

from .routers import (
    api_create_diagnostics_router,
    api_create_foundation_router,
    api_create_health_router,
    api_create_info_router,
    api_create_status_router,
)

API_PREFIX = "/api/v1"

logger = logging.getLogger(__name__)


def create_api_application(
    settings: AppSettings,
    reporter: StatusReporter,
    metrics_source: RuntimeMetricsPort,
    statistics_tracker: RequestStatisticsTracker,
    sleep_function: Callable[[float], None] | None = None,
) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings used for runtime metadata and debug routes.
        reporter: Status reporter producing snapshots.
        metrics_source: Runtime source for platform metadata.
        statistics_tracker: HTTP request counters updated by middleware.
        sleep_function: Optional blocking sleep override for the slow debug endpoint.

    Returns:
        FastAPI: Framework application instance with all routers mounted.

    Raises:
        ValueError: Raised when a router dependency is invalid.
    """

    if statistics_tracker is None:
        raise ValueError("statistics_tracker must not be None")

    application = FastAPI(title="InfoLine API", version=settings.app_version)

    @application.middleware("http")
    async def api_track_request_statistics(request: Request, call_next):
        statistics_tracker.stats_request_started()
        try:
            return await call_next(request)
        finally:
            statistics_tracker.stats_request_finished()

    @application.exception_handler(InvalidArgumentError)
    async def api_handle_invalid_argument(_request: Request, error: InvalidArgumentError) -> JSONResponse:
        payload = {
            "status": "error",
            "code": "INVALID_RUNTIME_COUNTERS",
            "message": str(error),
        }
        return JSONResponse(content=payload, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    application.include_router(api_create_foundation_router(reporter=reporter, api_prefix=API_PREFIX), prefix=API_PREFIX)
    application.include_router(api_create_health_router(reporter=reporter), prefix=API_PREFIX)
    application.include_router(
        api_create_info_router(reporter=reporter, metrics_source=metrics_source),
        prefix=API_PREFIX,
    )
    application.include_router(
        api_create_status_router(reporter=reporter, statistics_tracker=statistics_tracker),
        prefix=API_PREFIX,
    )

    if settings.config_debug_endpoints_active():
        logger.warning("Debug endpoints enabled under %s/test for environment=%s", API_PREFIX, settings.environment_name)
        application.include_router(
            api_create_diagnostics_router(settings=settings, reporter=reporter, sleep_function=sleep_function),
            prefix=API_PREFIX,
        )

    return application

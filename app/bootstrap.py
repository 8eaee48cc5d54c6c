"""Application bootstrap wiring for startup validation and dependency assembly."""

import logging

from fastapi import FastAPI

from app.api import create_api_application
from app.config import AppSettings, config_load_settings
from app.domain import AppMetadata
from app.runtime import (
    ClockPort,
    PsutilRuntimeMetricsService,
    RequestStatisticsTracker,
    RuntimeMetricsPort,
    SystemClock,
)
from app.status import StatusReporter

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger(__name__)


def bootstrap_configure_logging(log_level: str) -> None:
    """Configure root logging once for the process.

    Args:
        log_level: Logging level name such as `INFO`.
    """

    logging.basicConfig(level=log_level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)


def bootstrap_create_status_reporter(
    settings: AppSettings,
    metrics_source: RuntimeMetricsPort | None = None,
    clock: ClockPort | None = None,
) -> StatusReporter:
    """Build the status reporter backed by the host clock and psutil metrics.

    Args:
        settings: Validated runtime settings.
        metrics_source: Optional runtime metrics source, defaults to psutil.
        clock: Optional clock, defaults to the host wall clock.

    Returns:
        StatusReporter: Reporter wired to live runtime sources.
    """

    metadata = AppMetadata(
        application_name=settings.application_name,
        version=settings.app_version,
        environment_name=settings.environment_name,
        description=settings.application_description,
    )
    return StatusReporter(
        metadata=metadata,
        metrics_source=metrics_source or PsutilRuntimeMetricsService(),
        clock=clock or SystemClock(),
    )


def bootstrap_create_application(settings: AppSettings | None = None) -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Args:
        settings: Optional pre-validated settings, loaded from environment when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings or config_load_settings()
    bootstrap_configure_logging(resolved_settings.log_level)
    clock = SystemClock()
    metrics_source = PsutilRuntimeMetricsService()
    reporter = bootstrap_create_status_reporter(resolved_settings, metrics_source=metrics_source, clock=clock)
    statistics_tracker = RequestStatisticsTracker(started_at=clock.clock_now())
    logger.info(
        "Assembling %s version=%s environment=%s",
        resolved_settings.application_name,
        resolved_settings.app_version,
        resolved_settings.environment_name,
    )
    return create_api_application(
        settings=resolved_settings,
        reporter=reporter,
        metrics_source=metrics_source,
        statistics_tracker=statistics_tracker,
    )

"""Runtime and operating system information endpoint router."""

from fastapi import APIRouter

from app.runtime import RuntimeMetricsPort
from app.status import StatusReporter


def api_create_info_router(reporter: StatusReporter, metrics_source: RuntimeMetricsPort) -> APIRouter:
    """Create info router exposing application, runtime, and system details.

    Args:
        reporter: Status reporter for metadata and formatted memory counters.
        metrics_source: Runtime source for platform metadata.

    Returns:
        APIRouter: Router exposing `/info` endpoint.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if reporter is None:
        raise ValueError("reporter must not be None")
    if metrics_source is None:
        raise ValueError("metrics_source must not be None")

    router = APIRouter(tags=["info"])

    @router.get("/info")
    def api_info_details() -> dict[str, object]:
        """Return application metadata with runtime and OS introspection.

        Returns:
            dict[str, object]: Info payload with formatted memory sizes.

        Raises:
            InvalidArgumentError: Raised when sampled memory counters are inconsistent.
        """

        snapshot = reporter.status_reporter_snapshot()
        platform_info = metrics_source.runtime_platform_info()
        metadata = reporter.metadata
        return {
            "application": {
                "name": metadata.application_name,
                "version": metadata.version,
                "environment": metadata.environment_name,
                "description": metadata.description,
            },
            "runtime": {
                "pythonVersion": platform_info.python_version,
                "pythonImplementation": platform_info.python_implementation,
                "processors": platform_info.processors,
                "memoryTotal": snapshot.memory_total,
                "memoryFree": snapshot.memory_free,
                "memoryUsed": snapshot.memory_used,
            },
            "system": {
                "os": platform_info.os_name,
                "osVersion": platform_info.os_version,
                "osArch": platform_info.os_arch,
            },
            "timestamp": snapshot.to_payload()["timestamp"],
        }

    return router

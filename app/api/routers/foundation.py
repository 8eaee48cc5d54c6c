"""Welcome endpoint router listing the public API surface."""

from fastapi import APIRouter

from app.status import StatusReporter

WELCOME_MESSAGE = "🏆 Bienvenue sur InfoLine API"
WELCOME_DESCRIPTION = "API REST pour l'actualité des technologies sportives"


def api_create_foundation_router(reporter: StatusReporter, api_prefix: str) -> APIRouter:
    """Create the root welcome router.

    Args:
        reporter: Status reporter providing application metadata and clock.
        api_prefix: Versioned path prefix used to advertise endpoint URLs.

    Returns:
        APIRouter: Router exposing `/` endpoint.

    Raises:
        ValueError: Raised when reporter is invalid.
    """

    if reporter is None:
        raise ValueError("reporter must not be None")

    router = APIRouter(tags=["foundation"])

    @router.get("/")
    def api_foundation_index() -> dict[str, object]:
        """Return welcome message with version, environment, and endpoint list.

        Returns:
            dict[str, object]: Welcome payload.
        """

        return {
            "message": WELCOME_MESSAGE,
            "description": WELCOME_DESCRIPTION,
            "version": reporter.metadata.version,
            "environment": reporter.metadata.environment_name,
            "timestamp": reporter.status_reporter_timestamp(),
            "endpoints": {
                "health": f"{api_prefix}/health",
                "info": f"{api_prefix}/info",
                "status": f"{api_prefix}/status",
            },
        }

    return router

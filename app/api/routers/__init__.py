"""API router package for endpoint composition."""

from .diagnostics import api_create_diagnostics_router
from .foundation import api_create_foundation_router
from .health import api_create_health_router
from .info import api_create_info_router
from .status import api_create_status_router

__all__ = [
    "api_create_diagnostics_router",
    "api_create_foundation_router",
    "api_create_health_router",
    "api_create_info_router",
    "api_create_status_router",
]

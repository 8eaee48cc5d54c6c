"""API layer package for FastAPI application and route composition."""

from .application import API_PREFIX, create_api_application

__all__ = ["API_PREFIX", "create_api_application"]

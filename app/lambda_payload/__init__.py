"""Lambda payload package for API Gateway placeholder handlers."""

from .handler import AUTH_SERVICE_MESSAGE, lambda_payload_handler

__all__ = ["AUTH_SERVICE_MESSAGE", "lambda_payload_handler"]

"""AWS Lambda placeholder handler for the auth service API Gateway route."""

from __future__ import annotations

import json
import logging
from typing import Any

from app.domain import domain_format_utc_timestamp

AUTH_SERVICE_MESSAGE = "InfoLine Auth Service - Hello World!"

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


def lambda_payload_handler(event: dict[str, Any], context: Any = None) -> dict[str, Any]:
    """Return a fixed JSON greeting with CORS headers for API Gateway.

    Args:
        event: API Gateway proxy event.
        context: Lambda runtime context, unused.

    Returns:
        dict[str, Any]: API Gateway proxy response.
    """

    _ = context
    logger.info("Event: %s", json.dumps(event, default=str))
    return {
        "statusCode": 200,
        "headers": {
            "Content-Type": "application/json",
            "Access-Control-Allow-Origin": "*",
        },
        "body": json.dumps(
            {
                "message": AUTH_SERVICE_MESSAGE,
                "timestamp": domain_format_utc_timestamp(),
            }
        ),
    }

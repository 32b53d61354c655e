"""API Gateway proxy response helpers."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

ResponseMethod = Callable[..., dict[str, Any]]


def response(status_code: int, body: Any = None) -> dict[str, Any]:
    """Build an API Gateway proxy result.

    Args:
        status_code: HTTP status code
        body: String body (sent as is) or any JSON-serializable value

    Returns:
        Dict with statusCode and a string body
    """
    return {
        "statusCode": status_code,
        "body": body if isinstance(body, str) else json.dumps(body),
    }


def _response_method(status_code: int) -> ResponseMethod:
    def method(body: Any = None) -> dict[str, Any]:
        logger.info("returning a %s response with body: %s", status_code, body)
        return response(status_code, body)

    method.__name__ = f"response_{status_code}"
    return method


ok = _response_method(200)
bad_request = _response_method(400)
server_error = _response_method(500)

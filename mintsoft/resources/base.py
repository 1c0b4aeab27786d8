"""
resources/base.py
-----------------

Request and error-dispatch logic shared by every resource.

``get_request``/``post_request`` send one call through the gateway and
hand back the raw ``httpx.Response``; deciding success or failure is
left to ``handle_response``.  Non-2xx responses are classified with a
fixed status mapping:

====== =======================
400    ``ValidationError``
401    ``AuthenticationError``
404    ``NotFoundError``
other  ``APIError``
====== =======================
"""

from __future__ import annotations

import json
from typing import Any, Dict, NoReturn, Optional

import httpx

from mintsoft.clients.http_client import HTTPClient, decode_body
from mintsoft.core.errors import (
    APIError,
    AuthenticationError,
    NotFoundError,
    ValidationError,
)
from mintsoft.logging_config import logger

ERROR_CLASSES = {
    400: ValidationError,
    401: AuthenticationError,
    404: NotFoundError,
}


def is_success(response: httpx.Response) -> bool:
    return 200 <= response.status_code < 300


def extract_error_message(body: Any) -> str:
    """Best-effort human readable message from an error body."""
    if isinstance(body, str):
        return body
    if isinstance(body, dict):
        return str(body.get("error") or body.get("message") or body)
    return "Unknown error"


def positive_int(value: Any) -> Optional[int]:
    """Return ``value`` as a positive int, or None if it is not one."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = int(value)
    except (TypeError, ValueError):
        return None
    return number if number > 0 else None


class BaseResource:
    """Base class for API resources bound to one gateway."""

    def __init__(self, client: HTTPClient) -> None:
        self.client = client

    def get_request(self, path: str, params: Optional[Dict[str, Any]] = None) -> httpx.Response:
        return self.client.get(path, params=params or None)

    def post_request(self, path: str, body: Optional[Dict[str, Any]] = None) -> httpx.Response:
        return self.client.post(path, json=body or None)

    def handle_response(self, response: httpx.Response) -> Any:
        """Return the decoded body of a 2xx response, raise otherwise."""
        if is_success(response):
            return decode_body(response)
        self.handle_error(response)

    def handle_error(self, response: httpx.Response) -> NoReturn:
        status = response.status_code
        error_message = extract_error_message(decode_body(response))
        error_class = ERROR_CLASSES.get(status, APIError)
        logger.warning(json.dumps({
            "event": "api_error",
            "url": str(response.request.url),
            "status_code": status,
            "error": error_class.__name__,
        }))
        raise error_class(
            self.build_error_message(status, error_message),
            response=response,
            status_code=status,
        )

    def build_error_message(self, status: int, error_message: str) -> str:
        if status == 401:
            return "Invalid or expired token"
        if status == 400:
            return f"Invalid request data: {error_message}"
        if status == 404:
            return "Resource not found"
        return f"API error: {status} - {error_message}"

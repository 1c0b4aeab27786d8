"""
core/errors.py
--------------

Exception hierarchy raised by the Mintsoft wrapper.

Every error carries the message, the ``httpx.Response`` that triggered
it (when there was one) and its status code.  ``APIError`` is the
catch-all; the remaining kinds subclass it so callers can handle a
specific case or everything at once.
"""

from __future__ import annotations

from typing import Any, Optional


class MintsoftError(Exception):
    """Base class for all Mintsoft errors."""

    def __init__(self, message: str = "", *, response: Any = None,
                 status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.response = response
        self.status_code = status_code


class APIError(MintsoftError):
    """Non-2xx response or unexpected payload from the API."""


class AuthenticationError(APIError):
    """Rejected credentials or token (HTTP 401)."""


class NotFoundError(APIError):
    """Requested resource does not exist (HTTP 404)."""


class ValidationError(APIError):
    """Invalid caller input, or HTTP 400 from the API."""

"""
resources/auth.py
-----------------

Credential exchange against ``POST /api/auth``.

The endpoint answers with the token as its whole body, sometimes as a
JSON string and sometimes as text that still carries the JSON quotes
(``"xxxx-xx-xxxx"``).  One layer of surrounding quotes is stripped so
callers always receive the bare token.  The token is returned, never
stored.
"""

from __future__ import annotations

import json
from typing import NoReturn

import httpx

from mintsoft.clients.http_client import decode_body
from mintsoft.core.errors import APIError, AuthenticationError, ValidationError
from mintsoft.logging_config import logger
from mintsoft.resources.base import BaseResource, extract_error_message, is_success
from mintsoft.schemas.auth import Credentials

AUTH_PATH = "/api/auth"


def strip_quotes(body: str) -> str:
    if len(body) >= 2 and body.startswith('"') and body.endswith('"'):
        return body[1:-1]
    return body


class AuthResource(BaseResource):
    def authenticate(self, username: str, password: str) -> str:
        """Exchange credentials for a token.

        :raises ValidationError: missing username or password (no request
            is sent), or HTTP 400
        :raises AuthenticationError: HTTP 401
        :raises APIError: any other non-2xx status
        """
        if not isinstance(username, str) or not username:
            raise ValidationError("Username required")
        if not isinstance(password, str) or not password:
            raise ValidationError("Password required")

        logger.info(json.dumps({"event": "auth_start", "username": username}))
        body = Credentials(username=username, password=password).model_dump()
        response = self.post_request(AUTH_PATH, body)
        if not is_success(response):
            self.handle_error(response)

        token = decode_body(response)
        if isinstance(token, (dict, list)) or token is None:
            raise APIError(
                f"Unexpected response payload: {type(token).__name__}",
                response=response,
                status_code=response.status_code,
            )
        token = str(token)
        logger.info(json.dumps({"event": "auth_success", "username": username}))
        return strip_quotes(token)

    def handle_error(self, response: httpx.Response) -> NoReturn:
        status = response.status_code
        error_message = extract_error_message(decode_body(response))
        logger.warning(json.dumps({
            "event": "auth_failed",
            "status_code": status,
        }))
        if status == 401:
            raise AuthenticationError("Invalid credentials", response=response, status_code=status)
        if status == 400:
            raise ValidationError(
                f"Invalid request: {error_message}", response=response, status_code=status
            )
        raise APIError(
            f"Authentication failed: {status} - {error_message}",
            response=response,
            status_code=status,
        )

"""
auth_client.py
--------------

Unauthenticated client used only to obtain a token.

Requests sent through an :class:`AuthClient` carry no
``Authorization`` header.  Typical use::

    token = AuthClient().auth.authenticate(username, password)
    client = Client(token=token)
"""

from __future__ import annotations

from functools import cached_property
from typing import Any, Dict, Optional

import httpx

from mintsoft.clients.http_client import HTTPClient
from mintsoft.core.config import DEFAULT_BASE_URL, Settings
from mintsoft.resources.auth import AuthResource


class AuthClient:
    BASE_URL = DEFAULT_BASE_URL

    def __init__(self, base_url: str = BASE_URL,
                 conn_opts: Optional[Dict[str, Any]] = None) -> None:
        self.base_url = base_url
        self.conn_opts: Dict[str, Any] = dict(conn_opts or {})
        self.http = HTTPClient(base_url, conn_opts=self.conn_opts)

    @classmethod
    def from_env(cls, **conn_opts: Any) -> "AuthClient":
        """Build an auth client from ``MINTSOFT_BASE_URL``/``MINTSOFT_TIMEOUT``."""
        settings = Settings()
        return cls(base_url=settings.base_url,
                   conn_opts={**settings.conn_opts(), **conn_opts})

    def connection(self) -> httpx.Client:
        return self.http.connection()

    @cached_property
    def auth(self) -> AuthResource:
        return AuthResource(self.http)

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "AuthClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

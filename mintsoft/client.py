"""
client.py
---------

Main entry point for authenticated calls.

A :class:`Client` owns one HTTP gateway carrying the bearer token and
lazily builds the resources that share it.  Configuration is passed
explicitly; :meth:`Client.from_env` is the only place the environment
is read.
"""

from __future__ import annotations

from functools import cached_property
from typing import Any, Dict, Optional

import httpx

from mintsoft.clients.http_client import HTTPClient
from mintsoft.core.config import DEFAULT_BASE_URL, Settings
from mintsoft.core.errors import ValidationError
from mintsoft.resources.orders import Orders
from mintsoft.resources.returns import Returns


class Client:
    """Mintsoft API client bound to one token and base URL.

    >>> client = Client(token="abc123")
    >>> client.orders.search("ORD-123")  # doctest: +SKIP
    """

    BASE_URL = DEFAULT_BASE_URL

    def __init__(self, token: str, base_url: str = BASE_URL,
                 conn_opts: Optional[Dict[str, Any]] = None) -> None:
        self.token = token
        self.base_url = base_url
        self.conn_opts: Dict[str, Any] = dict(conn_opts or {})
        self.http = HTTPClient(base_url, token=token, conn_opts=self.conn_opts)

    @classmethod
    def from_env(cls, **conn_opts: Any) -> "Client":
        """Build a client from ``MINTSOFT_*`` environment variables.

        :raises ValidationError: ``MINTSOFT_TOKEN`` is not set
        """
        settings = Settings()
        if not settings.token:
            raise ValidationError("Token required")
        return cls(token=settings.token, base_url=settings.base_url,
                   conn_opts={**settings.conn_opts(), **conn_opts})

    def connection(self) -> httpx.Client:
        return self.http.connection()

    @cached_property
    def orders(self) -> Orders:
        return Orders(self.http)

    @cached_property
    def returns(self) -> Returns:
        return Returns(self.http)

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

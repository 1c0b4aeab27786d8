"""
clients/http_client.py
----------------------

HTTP gateway bound to one Mintsoft base URL.

Wraps an ``httpx.Client`` configured with the base URL, JSON accept
header and, for the main client, a bearer ``Authorization`` header.
The underlying connection is created lazily and memoised for the
lifetime of the gateway, so every resource sharing a gateway shares
one connection pool.

Each call issues exactly one request.  There are no retries and no
timeouts beyond what is passed in ``conn_opts`` (or httpx defaults);
network errors from httpx propagate to the caller unchanged.
"""

from __future__ import annotations

import time
from typing import Any, Dict, Optional

import httpx

from mintsoft.logging_config import log_http_request


def decode_body(response: httpx.Response) -> Any:
    """Return the decoded body of ``response``.

    JSON content types are decoded; if decoding fails, or the content
    type is anything else, the raw text is returned.
    """
    content_type = response.headers.get("content-type", "")
    if "json" in content_type.lower():
        try:
            return response.json()
        except ValueError:
            return response.text
    return response.text


class HTTPClient:
    """Configured connection factory for one base URL and optional token.

    ``conn_opts`` are forwarded to :class:`httpx.Client` verbatim
    (``timeout``, ``transport``, ``verify``...).  Extra ``headers`` in
    ``conn_opts`` are merged beneath the fixed ones.
    """

    def __init__(self, base_url: str, token: Optional[str] = None,
                 conn_opts: Optional[Dict[str, Any]] = None) -> None:
        self.base_url = base_url
        self.token = token
        self.conn_opts: Dict[str, Any] = dict(conn_opts or {})
        if "base_url" in self.conn_opts:
            raise ValueError("base_url must be passed as an argument, not in conn_opts")
        self._client: Optional[httpx.Client] = None

    def _headers(self) -> Dict[str, str]:
        headers: Dict[str, str] = dict(self.conn_opts.get("headers") or {})
        headers["Accept"] = "application/json"
        if self.token is not None:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def connection(self) -> httpx.Client:
        """Return the memoised ``httpx.Client``, creating it on first use."""
        if self._client is None:
            opts = {k: v for k, v in self.conn_opts.items() if k != "headers"}
            self._client = httpx.Client(base_url=self.base_url, headers=self._headers(), **opts)
        return self._client

    def close(self) -> None:
        """Close the underlying connection, if one was opened."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def request(self, method: str, path: str, *, params: Optional[Dict[str, Any]] = None,
                json: Any = None) -> httpx.Response:
        """Send one request and return the raw response.

        The status code is not inspected here; classification is the
        resource layer's job.
        """
        method = method.upper()
        client = self.connection()
        request = client.build_request(method, path, params=params, json=json)
        url = str(request.url)
        headers = dict(request.headers)
        log_http_request(method, url, headers=headers, params=params, json_body=json)
        start_time = time.time()
        response = client.send(request)
        duration_ms = (time.time() - start_time) * 1000
        log_http_request(method, url, headers=headers, params=params, json_body=json,
                         status=response.status_code, duration_ms=duration_ms)
        return response

    def get(self, path: str, *, params: Optional[Dict[str, Any]] = None) -> httpx.Response:
        return self.request("GET", path, params=params)

    def post(self, path: str, *, json: Any = None) -> httpx.Response:
        return self.request("POST", path, json=json)
